"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from fundfolio.domain.models import IntentStatus, TradeKind


class TradeRequest(BaseModel):
    """Request schema for buy and sell."""

    fund_id: str = Field(..., min_length=1)
    units: Decimal = Field(..., description="Units to trade, at most 8 decimal places")


class HoldingResponse(BaseModel):
    model_config = {"from_attributes": True}

    fund_id: str
    units: Decimal
    purchase_nav: Decimal


class OperationResponse(BaseModel):
    """Response schema for a completed buy, sell or deposit."""

    message: str
    wallet_balance: Decimal
    holding: Optional[HoldingResponse] = None


class PortfolioResponse(BaseModel):
    """Raw holdings plus wallet balance."""

    wallet_balance: Decimal
    holdings: list[HoldingResponse]


class HoldingValuationResponse(BaseModel):
    model_config = {"from_attributes": True}

    fund_id: str
    fund_name: str
    units: Decimal
    purchase_nav: Decimal
    current_nav: Decimal
    current_value: Decimal
    invested_value: Decimal
    return_value: Decimal
    return_percent: Decimal
    expected_return: Decimal
    return_1y: str
    price_available: bool


class PortfolioStatsResponse(BaseModel):
    """Response schema for portfolio valuation."""

    model_config = {"from_attributes": True}

    total_value: Decimal
    total_invested: Decimal
    total_return: Decimal
    total_return_percent: Decimal
    expected_return: Decimal
    expected_return_percent: Decimal
    funds_invested: int
    holdings: list[HoldingValuationResponse]


class ActivityResponse(BaseModel):
    """One entry of the operation log."""

    model_config = {"from_attributes": True}

    intent_id: str
    kind: TradeKind
    status: IntentStatus
    amount: Decimal
    fund_id: Optional[str] = None
    units: Optional[Decimal] = None
    nav: Optional[Decimal] = None
    wallet_after: Decimal
    created_at: Optional[datetime] = None


class ActivityListResponse(BaseModel):
    activity: list[ActivityResponse]
    count: int
