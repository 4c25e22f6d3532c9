"""Stub fund data provider for offline/testing use."""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Optional

from fundfolio.core.timezone import now_ist

# name, category, fund house, starting NAV
_STUB_SCHEMES: dict[str, tuple[str, str, str, Decimal]] = {
    "119551": (
        "Aditya Birla Sun Life Banking & PSU Debt Fund - Direct Growth",
        "Debt Scheme - Banking and PSU Fund",
        "Aditya Birla Sun Life Mutual Fund",
        Decimal("290.00"),
    ),
    "120503": (
        "Axis ELSS Tax Saver Fund - Direct Growth",
        "Equity Scheme - ELSS",
        "Axis Mutual Fund",
        Decimal("78.00"),
    ),
    "118989": (
        "HDFC Mid-Cap Opportunities Fund - Direct Growth",
        "Equity Scheme - Mid Cap Fund",
        "HDFC Mutual Fund",
        Decimal("130.00"),
    ),
    "125497": (
        "SBI Small Cap Fund - Direct Growth",
        "Equity Scheme - Small Cap Fund",
        "SBI Mutual Fund",
        Decimal("140.00"),
    ),
    "122639": (
        "Parag Parikh Flexi Cap Fund - Direct Growth",
        "Equity Scheme - Flexi Cap Fund",
        "PPFAS Mutual Fund",
        Decimal("62.00"),
    ),
}


class StubFundDataProvider:
    """
    Stub provider with deterministic fake NAV histories for offline operation.

    Known scheme codes get fixed metadata; unknown codes get generated names.
    Histories are a seeded random walk over business days, newest first.
    """

    def __init__(self, seed: int = 42, days: int = 400, as_of: Optional[date] = None):
        self._seed = seed
        self._days = days
        self._as_of = as_of

    def get_scheme(self, fund_id: str) -> dict[str, Any]:
        """Return a stub scheme payload for the requested code."""
        if fund_id in _STUB_SCHEMES:
            name, category, fund_house, start_nav = _STUB_SCHEMES[fund_id]
        else:
            name = f"Stub Fund {fund_id} - Direct Growth"
            category = "Hybrid Scheme - Balanced Advantage"
            fund_house = "Stub Mutual Fund"
            start_nav = Decimal("100.00")

        rng = random.Random(f"{self._seed}:{fund_id}")
        nav = start_nav
        points: list[dict[str, str]] = []
        for day in self._business_days():
            change = Decimal(str(round((rng.random() - 0.48) * 0.02, 6)))
            nav = (nav * (1 + change)).quantize(Decimal("0.0001"))
            points.append({"date": day.strftime("%d-%m-%Y"), "nav": str(nav)})
        points.reverse()

        return {
            "meta": {
                "fund_house": fund_house,
                "scheme_type": "Open Ended Schemes",
                "scheme_category": category,
                "scheme_code": int(fund_id) if fund_id.isdigit() else fund_id,
                "scheme_name": name,
            },
            "data": points,
            "status": "SUCCESS",
        }

    def _business_days(self) -> list[date]:
        """Return the last ``days`` weekdays up to as_of, oldest first."""
        current = self._as_of or now_ist().date()
        days: list[date] = []
        while len(days) < self._days:
            if current.weekday() < 5:
                days.append(current)
            current -= timedelta(days=1)
        days.reverse()
        return days
