"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fundfolio.config.settings import get_settings
from fundfolio.config.logging_config import setup_logging
from fundfolio.repositories.sqlalchemy.database import init_db
from fundfolio.api.routers import auth_router, funds_router, wallet_router, portfolio_router
from fundfolio.app_context import shutdown_app_context
from fundfolio.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown: close sessions and the HTTP client
    shutdown_app_context()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Mutual fund portfolio tracker with a simulated wallet",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(auth_router)
app.include_router(funds_router)
app.include_router(wallet_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
