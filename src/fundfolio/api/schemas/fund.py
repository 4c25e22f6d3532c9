"""Pydantic schemas for fund catalog endpoints."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class FundResponse(BaseModel):
    """Response schema for a single fund."""

    model_config = {"from_attributes": True}

    fund_id: str
    name: str
    nav: Decimal
    nav_date: Optional[date] = None
    return_1y: str
    category: str
    fund_house: str
    risk_level: str


class FundListResponse(BaseModel):
    """Response schema for the catalog listing."""

    funds: list[FundResponse]
    count: int


class NavPointResponse(BaseModel):
    model_config = {"from_attributes": True}

    nav_date: date
    nav: Decimal


class FundHistoryResponse(BaseModel):
    """Response schema for a fund's NAV history, oldest first."""

    fund_id: str
    points: list[NavPointResponse]
