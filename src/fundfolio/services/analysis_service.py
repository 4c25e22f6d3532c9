"""Analysis service for portfolio valuation."""

from decimal import Decimal

from fundfolio.core.money import ZERO, percent, round_money, round_nav
from fundfolio.domain.models import Fund, Holding
from fundfolio.domain.views import HoldingView, PortfolioStats
from fundfolio.services.catalog_service import CatalogService


class AnalysisService:
    """
    Service for portfolio valuation and reporting.

    Values holdings against the current catalog snapshot. Read only.
    """

    def __init__(self, catalog_service: CatalogService):
        self._catalog = catalog_service

    def portfolio_stats(self, portfolio: dict[str, Holding]) -> PortfolioStats:
        """Value a portfolio against the current catalog."""
        if not portfolio:
            return PortfolioStats()
        return self.compute_stats(portfolio, self._catalog.get_fund_map())

    @staticmethod
    def compute_stats(
        portfolio: dict[str, Holding],
        funds: dict[str, Fund],
    ) -> PortfolioStats:
        """
        Aggregate value, invested amount and returns.

        Formulas:
            value    = Σ(units × current NAV)
            invested = Σ(units × purchase NAV)
            expected = Σ(invested_i × trailing_1y_i / 100)

        A holding whose fund is not in ``funds`` is valued at its purchase NAV.
        """
        total_value = ZERO
        total_invested = ZERO
        total_expected = ZERO
        rows: list[HoldingView] = []

        for fund_id in sorted(portfolio):
            holding = portfolio[fund_id]
            fund = funds.get(fund_id)
            current_nav = fund.nav if fund else holding.purchase_nav

            value = holding.value_at(current_nav)
            invested = holding.cost_basis
            expected = ZERO
            if fund and fund.return_1y_pct is not None:
                expected = invested * fund.return_1y_pct / Decimal("100")

            total_value += value
            total_invested += invested
            total_expected += expected

            rows.append(
                HoldingView(
                    fund_id=fund_id,
                    fund_name=fund.name if fund else fund_id,
                    units=holding.units,
                    purchase_nav=round_nav(holding.purchase_nav),
                    current_nav=round_nav(current_nav),
                    current_value=round_money(value),
                    invested_value=round_money(invested),
                    return_value=round_money(value - invested),
                    return_percent=percent(value - invested, invested),
                    expected_return=round_money(expected),
                    return_1y=fund.return_1y if fund else "N/A",
                    price_available=fund is not None,
                )
            )

        total_return = total_value - total_invested
        return PortfolioStats(
            total_value=round_money(total_value),
            total_invested=round_money(total_invested),
            total_return=round_money(total_return),
            total_return_percent=percent(total_return, total_invested),
            expected_return=round_money(total_expected),
            expected_return_percent=percent(total_expected, total_invested),
            funds_invested=len(rows),
            holdings=rows,
        )
