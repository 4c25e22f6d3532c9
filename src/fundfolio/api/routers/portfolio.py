"""Portfolio endpoints: holdings, valuation, buy and sell."""

from fastapi import APIRouter, Depends, Query

from fundfolio.api.deps import (
    get_analysis_service,
    get_catalog_service,
    get_current_ledger,
)
from fundfolio.api.results import to_operation_response
from fundfolio.api.schemas import (
    ActivityListResponse,
    ActivityResponse,
    HoldingResponse,
    OperationResponse,
    PortfolioResponse,
    PortfolioStatsResponse,
    TradeRequest,
)
from fundfolio.services import AnalysisService, CatalogService, Ledger

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(ledger: Ledger = Depends(get_current_ledger)):
    """Holdings of the signed-in user, ordered by fund ID."""
    portfolio = ledger.get_portfolio()
    return PortfolioResponse(
        wallet_balance=ledger.get_wallet_balance(),
        holdings=[HoldingResponse.model_validate(portfolio[k]) for k in sorted(portfolio)],
    )


@router.get("/stats", response_model=PortfolioStatsResponse)
def get_portfolio_stats(
    ledger: Ledger = Depends(get_current_ledger),
    analysis: AnalysisService = Depends(get_analysis_service),
):
    """Value the portfolio against current NAVs."""
    stats = analysis.portfolio_stats(ledger.get_portfolio())
    return PortfolioStatsResponse.model_validate(stats)


@router.post("/buy", response_model=OperationResponse)
def buy(
    data: TradeRequest,
    ledger: Ledger = Depends(get_current_ledger),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Buy units at the fund's current NAV."""
    fund = catalog.get_fund(data.fund_id)
    return to_operation_response(ledger.buy(fund, data.units))


@router.post("/sell", response_model=OperationResponse)
def sell(
    data: TradeRequest,
    ledger: Ledger = Depends(get_current_ledger),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Sell units at the fund's current NAV."""
    fund = catalog.get_fund(data.fund_id)
    return to_operation_response(ledger.sell(fund, data.units))


@router.get("/activity", response_model=ActivityListResponse)
def get_activity(
    limit: int = Query(50, ge=1, le=500),
    ledger: Ledger = Depends(get_current_ledger),
):
    """Recent buys, sells and deposits, newest first."""
    intents = ledger.list_activity(limit=limit)
    return ActivityListResponse(
        activity=[ActivityResponse.model_validate(i) for i in intents],
        count=len(intents),
    )
