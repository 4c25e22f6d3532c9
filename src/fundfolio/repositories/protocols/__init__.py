"""Repository protocol definitions (interfaces)."""

from fundfolio.repositories.protocols.user_repo import UserRepository
from fundfolio.repositories.protocols.wallet_repo import WalletRepository
from fundfolio.repositories.protocols.holding_repo import HoldingRepository
from fundfolio.repositories.protocols.intent_repo import IntentRepository

__all__ = [
    "UserRepository",
    "WalletRepository",
    "HoldingRepository",
    "IntentRepository",
]
