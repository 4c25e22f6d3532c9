"""View models for ledger and analysis outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from fundfolio.domain.models import Holding


class LedgerErrorKind(str, Enum):
    """Why a ledger operation was rejected."""

    VALIDATION = "VALIDATION"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INSUFFICIENT_UNITS = "INSUFFICIENT_UNITS"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass
class LedgerResult:
    """
    Outcome of a buy, sell or deposit.

    Truthy on success. On failure ``error`` names the kind and the ledger
    state is unchanged. ``wallet_balance`` and ``holding`` describe the state
    after the operation (holding is None when the fund is no longer held).
    """

    ok: bool
    error: Optional[LedgerErrorKind] = None
    message: str = ""
    wallet_balance: Optional[Decimal] = None
    holding: Optional[Holding] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(
        cls,
        message: str,
        wallet_balance: Decimal,
        holding: Optional[Holding] = None,
    ) -> "LedgerResult":
        return cls(ok=True, message=message, wallet_balance=wallet_balance, holding=holding)

    @classmethod
    def failure(cls, error: LedgerErrorKind, message: str) -> "LedgerResult":
        return cls(ok=False, error=error, message=message)


@dataclass
class HoldingView:
    """A holding valued against the current catalog snapshot."""

    fund_id: str
    fund_name: str
    units: Decimal
    purchase_nav: Decimal
    current_nav: Decimal
    current_value: Decimal
    invested_value: Decimal
    return_value: Decimal
    return_percent: Decimal
    expected_return: Decimal
    return_1y: str = "N/A"
    price_available: bool = True


@dataclass
class PortfolioStats:
    """Aggregated portfolio statistics."""

    total_value: Decimal = field(default_factory=lambda: Decimal("0.00"))
    total_invested: Decimal = field(default_factory=lambda: Decimal("0.00"))
    total_return: Decimal = field(default_factory=lambda: Decimal("0.00"))
    total_return_percent: Decimal = field(default_factory=lambda: Decimal("0.00"))
    expected_return: Decimal = field(default_factory=lambda: Decimal("0.00"))
    expected_return_percent: Decimal = field(default_factory=lambda: Decimal("0.00"))
    funds_invested: int = 0
    holdings: list[HoldingView] = field(default_factory=list)
