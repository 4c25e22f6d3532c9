"""Holding and wallet domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Holding:
    """
    A user's position in a single fund.

    Exists only while units > 0; the row is deleted when units reach 0.
    purchase_nav is the price basis used for return calculation.
    """

    user_id: str
    fund_id: str
    units: Decimal
    purchase_nav: Decimal
    updated_at: Optional[datetime] = field(default=None)

    @property
    def cost_basis(self) -> Decimal:
        return self.units * self.purchase_nav

    def value_at(self, nav: Decimal) -> Decimal:
        """Market value of the holding at the given NAV."""
        return self.units * nav


@dataclass
class Wallet:
    """Uninvested cash balance of a user."""

    user_id: str
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    updated_at: Optional[datetime] = field(default=None)
