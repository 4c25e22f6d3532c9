"""Enumerations for domain models."""

from enum import Enum


class TradeKind(str, Enum):
    """Kinds of ledger operations recorded in the intent log."""

    BUY = "BUY"
    SELL = "SELL"
    DEPOSIT = "DEPOSIT"


class IntentStatus(str, Enum):
    """Lifecycle of a trade intent."""

    PENDING = "PENDING"  # external writes may be partially applied
    COMPLETED = "COMPLETED"
    COMPENSATED = "COMPENSATED"  # before-state restored
    FAILED = "FAILED"  # first write failed, nothing applied
