"""Domain layer - pure business models with no external dependencies."""

from fundfolio.domain.models import (
    TradeKind,
    IntentStatus,
    Fund,
    NavPoint,
    Holding,
    Wallet,
    TradeIntent,
    User,
)

__all__ = [
    "TradeKind",
    "IntentStatus",
    "Fund",
    "NavPoint",
    "Holding",
    "Wallet",
    "TradeIntent",
    "User",
]
