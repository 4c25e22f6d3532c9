"""Timezone utilities for Indian market time."""

from datetime import date, datetime

import pytz
from dateutil import parser as date_parser

IST_TZ = pytz.timezone("Asia/Kolkata")


def now_ist() -> datetime:
    """Return current time in Asia/Kolkata timezone."""
    return datetime.now(IST_TZ)


def parse_nav_date(value: str) -> date:
    """
    Parse a NAV date as published by the price API.

    The API uses day-first dates ("19-10-2026"); ISO dates are accepted too.
    """
    value = value.strip()
    if len(value) == 10 and value[4] == "-":
        return date.fromisoformat(value)
    return date_parser.parse(value, dayfirst=True).date()

