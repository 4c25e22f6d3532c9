"""API routers package."""

from fundfolio.api.routers.auth import router as auth_router
from fundfolio.api.routers.funds import router as funds_router
from fundfolio.api.routers.wallet import router as wallet_router
from fundfolio.api.routers.portfolio import router as portfolio_router

__all__ = [
    "auth_router",
    "funds_router",
    "wallet_router",
    "portfolio_router",
]
