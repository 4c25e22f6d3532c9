"""Repository layer - data access abstractions and implementations."""

from fundfolio.repositories.protocols import (
    UserRepository,
    WalletRepository,
    HoldingRepository,
    IntentRepository,
)

__all__ = [
    "UserRepository",
    "WalletRepository",
    "HoldingRepository",
    "IntentRepository",
]
