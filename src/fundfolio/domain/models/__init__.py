"""Domain models package."""

from fundfolio.domain.models.enums import TradeKind, IntentStatus
from fundfolio.domain.models.fund import Fund, NavPoint
from fundfolio.domain.models.holding import Holding, Wallet
from fundfolio.domain.models.intent import TradeIntent
from fundfolio.domain.models.user import User

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
