"""Trade intent repository protocol."""

from typing import Protocol

from fundfolio.domain.models import TradeIntent, IntentStatus


class IntentRepository(Protocol):
    """Interface for the durable trade intent log."""

    def create(self, intent: TradeIntent) -> TradeIntent:
        """Persist a new intent."""
        ...

    def set_status(self, intent_id: str, status: IntentStatus) -> None:
        """Move an intent to a new status."""
        ...

    def list_pending(self, user_id: str) -> list[TradeIntent]:
        """List PENDING intents of a user, oldest first."""
        ...

    def list_by_user(self, user_id: str, limit: int = 50) -> list[TradeIntent]:
        """List recent intents of a user, newest first."""
        ...
