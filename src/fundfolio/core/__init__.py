"""Core utilities and shared functionality."""

from fundfolio.core.timezone import (
    now_ist,
    parse_nav_date,
    IST_TZ,
)
from fundfolio.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InsufficientUnitsError,
    InsufficientFundsError,
    UnauthenticatedError,
    StoreError,
    ProviderError,
    CatalogUnavailableError,
    HistoryUnavailableError,
)

__all__ = [
    "now_ist",
    "parse_nav_date",
    "IST_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InsufficientUnitsError",
    "InsufficientFundsError",
    "UnauthenticatedError",
    "StoreError",
    "ProviderError",
    "CatalogUnavailableError",
    "HistoryUnavailableError",
]
