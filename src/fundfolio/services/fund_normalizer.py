"""Normalization of raw price API payloads into Fund and NavPoint records."""

from decimal import Decimal
from typing import Any, Optional

from fundfolio.core.money import CENT, to_decimal
from fundfolio.core.timezone import parse_nav_date
from fundfolio.domain.models import Fund, NavPoint

DEFAULT_RISK_LEVEL = "Moderate"


def parse_nav_history(payload: dict[str, Any]) -> list[NavPoint]:
    """
    Extract NAV points from a scheme payload, oldest to newest.

    The API publishes newest first; sorting by date makes the result
    independent of the provider's order. Entries with an unparsable date or
    a missing / non-positive NAV are skipped.
    """
    rows = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(rows, list):
        raise ValueError("Scheme payload has no NAV data list")

    by_date: dict = {}
    for row in rows:
        if not isinstance(row, dict):
            continue
        nav = to_decimal(row.get("nav"))
        if nav is None or nav <= 0:
            continue
        try:
            nav_date = parse_nav_date(str(row.get("date", "")))
        except (ValueError, OverflowError):
            continue
        by_date[nav_date] = nav

    return [NavPoint(nav_date=d, nav=by_date[d]) for d in sorted(by_date)]


def trailing_return(points: list[NavPoint], lookback: int = 252) -> Optional[Decimal]:
    """
    Percentage return from the NAV ``lookback`` entries back to the latest NAV.

    Falls back to the oldest entry when the history is shorter than the
    lookback. Returns None when fewer than two points exist.
    """
    if len(points) < 2:
        return None
    latest = points[-1].nav
    reference = points[max(len(points) - 1 - lookback, 0)].nav
    if reference <= 0:
        return None
    return ((latest / reference - 1) * 100).quantize(CENT)


def normalize_fund(fund_id: str, payload: dict[str, Any], lookback: int = 252) -> Fund:
    """
    Build a Fund snapshot from a scheme payload.

    Raises ValueError when the payload carries no usable NAV.
    """
    points = parse_nav_history(payload)
    if not points:
        raise ValueError(f"No NAV data for fund {fund_id}")

    meta = payload.get("meta")
    if not isinstance(meta, dict):
        meta = {}

    return Fund(
        fund_id=str(fund_id),
        name=_text(meta.get("scheme_name")) or str(fund_id),
        nav=points[-1].nav,
        nav_date=points[-1].nav_date,
        return_1y_pct=trailing_return(points, lookback),
        category=_text(meta.get("scheme_category")) or "N/A",
        fund_house=_text(meta.get("fund_house")) or "N/A",
        risk_level=_text(meta.get("risk_level")) or DEFAULT_RISK_LEVEL,
    )


def _text(value: Any) -> str:
    return str(value).strip() if value is not None else ""
