"""Fund catalog domain models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from fundfolio.core.money import format_percent


@dataclass(frozen=True)
class NavPoint:
    """NAV of a fund on one date."""

    nav_date: date
    nav: Decimal


@dataclass(frozen=True)
class Fund:
    """
    Snapshot of a mutual fund as reported by the price API.

    Immutable; a newer snapshot replaces it on re-fetch. Category, fund house
    and risk level are informational and never used in calculations.
    """

    fund_id: str
    name: str
    nav: Decimal
    nav_date: Optional[date] = None
    return_1y_pct: Optional[Decimal] = None
    category: str = "N/A"
    fund_house: str = "N/A"
    risk_level: str = "Moderate"

    @property
    def return_1y(self) -> str:
        """Trailing one-year return formatted as "<value>%" or "N/A"."""
        return format_percent(self.return_1y_pct)
