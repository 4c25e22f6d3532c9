"""Wallet repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from fundfolio.domain.models import Wallet


class WalletRepository(Protocol):
    """
    Interface for the per-user wallet row.

    Each call is an independent write; no multi-row transaction is assumed.
    """

    def get(self, user_id: str) -> Optional[Wallet]:
        """Get the wallet for a user."""
        ...

    def set_balance(self, user_id: str, balance: Decimal) -> Wallet:
        """Set the wallet balance to an absolute value (insert if missing)."""
        ...
