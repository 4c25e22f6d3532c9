"""Holding repository protocol."""

from typing import Protocol, Optional

from fundfolio.domain.models import Holding


class HoldingRepository(Protocol):
    """Interface for per-user holding rows keyed by fund ID."""

    def list_by_user(self, user_id: str) -> list[Holding]:
        """List all holdings of a user."""
        ...

    def get(self, user_id: str, fund_id: str) -> Optional[Holding]:
        """Get one holding."""
        ...

    def insert(self, holding: Holding) -> Holding:
        """Insert a new holding row."""
        ...

    def update(self, holding: Holding) -> Holding:
        """Update units and purchase NAV of an existing holding."""
        ...

    def delete(self, user_id: str, fund_id: str) -> None:
        """Delete a holding row (no-op if absent)."""
        ...
