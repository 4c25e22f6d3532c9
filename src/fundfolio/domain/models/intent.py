"""Trade intent domain model (durable log of in-flight ledger operations)."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fundfolio.domain.models.enums import TradeKind, IntentStatus


@dataclass
class TradeIntent:
    """
    Record of one ledger operation and the store state around it.

    Written PENDING before the first external write. The before/after
    snapshots let recovery either confirm the operation or restore the
    before-state with absolute writes, so replaying recovery is harmless.
    A None holding snapshot means "no holding row".
    """

    intent_id: str
    user_id: str
    kind: TradeKind
    wallet_before: Decimal
    wallet_after: Decimal
    amount: Decimal
    fund_id: Optional[str] = None
    units: Optional[Decimal] = None
    nav: Optional[Decimal] = None
    units_before: Optional[Decimal] = None
    purchase_nav_before: Optional[Decimal] = None
    units_after: Optional[Decimal] = None
    purchase_nav_after: Optional[Decimal] = None
    status: IntentStatus = IntentStatus.PENDING
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            self.kind = TradeKind(self.kind)
        if isinstance(self.status, str):
            self.status = IntentStatus(self.status)

    @property
    def touches_holding(self) -> bool:
        """Return True if this intent writes a holding row."""
        return self.kind in (TradeKind.BUY, TradeKind.SELL)
