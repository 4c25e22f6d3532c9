"""
Unit tests for AnalysisService.

Tests cover:
- Value, invested and return totals
- Expected return from trailing one-year returns
- Holdings whose fund is missing from the catalog
- Empty portfolios
"""

from decimal import Decimal

from fundfolio.domain.models import Holding
from fundfolio.services import AnalysisService

from tests.conftest import fund


def holding(fund_id: str, units: str, purchase_nav: str) -> Holding:
    return Holding(
        user_id="user-1",
        fund_id=fund_id,
        units=Decimal(units),
        purchase_nav=Decimal(purchase_nav),
    )


# =============================================================================
# COMPUTE STATS TESTS
# =============================================================================


class TestComputeStats:
    """Tests for the pure valuation function."""

    def test_single_holding_return(self):
        """
        GIVEN 10 units bought at NAV 100
        WHEN the NAV is 120
        THEN value is 1200, return is 200 (20%)
        """
        stats = AnalysisService.compute_stats(
            {"100001": holding("100001", "10", "100")},
            {"100001": fund("100001", "120")},
        )

        assert stats.total_value == Decimal("1200.00")
        assert stats.total_invested == Decimal("1000.00")
        assert stats.total_return == Decimal("200.00")
        assert stats.total_return_percent == Decimal("20.00")
        assert stats.funds_invested == 1

    def test_expected_return_uses_trailing_return(self):
        stats = AnalysisService.compute_stats(
            {
                "100001": holding("100001", "10", "100"),
                "100002": holding("100002", "20", "50"),
            },
            {
                "100001": fund("100001", "110", return_1y_pct=Decimal("12.50")),
                "100002": fund("100002", "50"),
            },
        )

        # 1000 x 12.5% + 1000 x 0
        assert stats.expected_return == Decimal("125.00")
        assert stats.expected_return_percent == Decimal("6.25")
        assert stats.total_value == Decimal("2100.00")
        assert stats.total_return_percent == Decimal("5.00")

    def test_holding_rows_are_sorted_and_valued(self):
        stats = AnalysisService.compute_stats(
            {
                "100002": holding("100002", "2", "50"),
                "100001": holding("100001", "1.5", "100"),
            },
            {
                "100001": fund("100001", "90", name="Alpha", return_1y_pct=Decimal("-3.10")),
                "100002": fund("100002", "55", name="Beta"),
            },
        )

        assert [row.fund_id for row in stats.holdings] == ["100001", "100002"]
        alpha = stats.holdings[0]
        assert alpha.fund_name == "Alpha"
        assert alpha.current_value == Decimal("135.00")
        assert alpha.invested_value == Decimal("150.00")
        assert alpha.return_value == Decimal("-15.00")
        assert alpha.return_percent == Decimal("-10.00")
        assert alpha.return_1y == "-3.10%"
        assert alpha.price_available is True

    def test_missing_fund_is_valued_at_purchase_nav(self):
        """
        GIVEN a holding whose fund is not in the catalog
        WHEN the portfolio is valued
        THEN it counts at its purchase NAV and is flagged as unpriced
        """
        stats = AnalysisService.compute_stats(
            {"999999": holding("999999", "10", "40")},
            {},
        )

        row = stats.holdings[0]
        assert row.price_available is False
        assert row.current_nav == Decimal("40")
        assert row.return_value == Decimal("0.00")
        assert row.return_1y == "N/A"
        assert stats.total_value == Decimal("400.00")

    def test_empty_portfolio(self):
        stats = AnalysisService.compute_stats({}, {})

        assert stats.total_value == Decimal("0")
        assert stats.total_return_percent == Decimal("0")
        assert stats.funds_invested == 0
        assert stats.holdings == []


# =============================================================================
# CATALOG-BACKED TESTS
# =============================================================================


class TestPortfolioStats:
    """Tests for valuation against the live catalog."""

    def test_values_against_catalog(self, analysis_service):
        stats = analysis_service.portfolio_stats({"100001": holding("100001", "10", "80")})

        assert stats.total_value == Decimal("1000.00")
        assert stats.total_return == Decimal("200.00")
        # trailing return of the test fund is 25%
        assert stats.expected_return == Decimal("200.00")

    def test_empty_portfolio_does_not_load_catalog(self, analysis_service, deterministic_provider):
        stats = analysis_service.portfolio_stats({})

        assert stats.funds_invested == 0
        assert deterministic_provider.calls == []
