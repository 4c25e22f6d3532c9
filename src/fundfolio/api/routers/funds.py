"""Fund catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fundfolio.api.deps import get_catalog_service, get_history_service
from fundfolio.api.schemas import (
    FundHistoryResponse,
    FundListResponse,
    FundResponse,
    NavPointResponse,
)
from fundfolio.services import CatalogService, HistoryService

router = APIRouter(prefix="/funds", tags=["funds"])


@router.get("", response_model=FundListResponse)
def list_funds(
    search: Optional[str] = Query(None, description="Case-insensitive name filter"),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List catalog funds, optionally filtered by name."""
    funds = catalog.search(search)
    return FundListResponse(
        funds=[FundResponse.model_validate(f) for f in funds],
        count=len(funds),
    )


@router.get("/{fund_id}", response_model=FundResponse)
def get_fund(fund_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    return FundResponse.model_validate(catalog.get_fund(fund_id))


@router.get("/{fund_id}/history", response_model=FundHistoryResponse)
def get_fund_history(fund_id: str, history: HistoryService = Depends(get_history_service)):
    """NAV history of a fund, oldest first."""
    points = history.get_history(fund_id)
    return FundHistoryResponse(
        fund_id=fund_id,
        points=[NavPointResponse.model_validate(p) for p in points],
    )
