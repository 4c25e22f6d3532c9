"""Decimal helpers for money, units and NAV values."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

CENT = Decimal("0.01")
NAV_QUANTUM = Decimal("0.000001")
ZERO = Decimal("0")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """
    Convert user or provider input to a finite Decimal.

    Returns None for missing, non-numeric, NaN or infinite input.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def round_money(value: Decimal) -> Decimal:
    """Round a money amount to paise."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_nav(value: Decimal) -> Decimal:
    """Round a NAV / price basis to six decimal places."""
    return value.quantize(NAV_QUANTUM, rounding=ROUND_HALF_UP)


def percent(part: Decimal, whole: Decimal) -> Decimal:
    """Return part / whole as a percentage, 0 when whole is 0."""
    if whole == ZERO:
        return ZERO.quantize(CENT)
    return (part / whole * 100).quantize(CENT, rounding=ROUND_HALF_UP)


def format_percent(value: Optional[Decimal]) -> str:
    """Render a percentage as "12.34%", or "N/A" when unavailable."""
    if value is None:
        return "N/A"
    return f"{value.quantize(CENT, rounding=ROUND_HALF_UP)}%"
