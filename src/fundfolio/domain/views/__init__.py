"""View models for service outputs."""

from fundfolio.domain.views.portfolio import (
    LedgerErrorKind,
    LedgerResult,
    HoldingView,
    PortfolioStats,
)

__all__ = [
    "LedgerErrorKind",
    "LedgerResult",
    "HoldingView",
    "PortfolioStats",
]
