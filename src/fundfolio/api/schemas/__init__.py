"""Pydantic schemas for API request/response."""

from fundfolio.api.schemas.auth import (
    CredentialsRequest,
    UserResponse,
    SessionResponse,
)
from fundfolio.api.schemas.fund import (
    FundResponse,
    FundListResponse,
    NavPointResponse,
    FundHistoryResponse,
)
from fundfolio.api.schemas.wallet import (
    DepositRequest,
    WalletResponse,
)
from fundfolio.api.schemas.portfolio import (
    TradeRequest,
    HoldingResponse,
    OperationResponse,
    PortfolioResponse,
    HoldingValuationResponse,
    PortfolioStatsResponse,
    ActivityResponse,
    ActivityListResponse,
)

__all__ = [
    "CredentialsRequest",
    "UserResponse",
    "SessionResponse",
    "FundResponse",
    "FundListResponse",
    "NavPointResponse",
    "FundHistoryResponse",
    "DepositRequest",
    "WalletResponse",
    "TradeRequest",
    "HoldingResponse",
    "OperationResponse",
    "PortfolioResponse",
    "HoldingValuationResponse",
    "PortfolioStatsResponse",
    "ActivityResponse",
    "ActivityListResponse",
]
