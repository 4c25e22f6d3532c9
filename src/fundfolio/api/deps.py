"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from fundfolio.app_context import AppContext, get_app_context
from fundfolio.core.exceptions import UnauthenticatedError
from fundfolio.domain.models import User
from fundfolio.repositories.sqlalchemy.database import get_db
from fundfolio.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyWalletRepository,
)
from fundfolio.services import (
    AnalysisService,
    AuthService,
    CatalogService,
    HistoryService,
    Ledger,
    SessionManager,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_wallet_repo(db: Session = Depends(get_db)) -> SqlAlchemyWalletRepository:
    """Provide WalletRepository instance."""
    return SqlAlchemyWalletRepository(db)


def get_auth_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    wallet_repo: SqlAlchemyWalletRepository = Depends(get_wallet_repo),
) -> AuthService:
    """Provide AuthService instance."""
    return AuthService(user_repo=user_repo, wallet_repo=wallet_repo)


def get_context() -> AppContext:
    """Provide the process-wide application context."""
    return get_app_context()


def get_catalog_service(context: AppContext = Depends(get_context)) -> CatalogService:
    return context.catalog


def get_history_service(context: AppContext = Depends(get_context)) -> HistoryService:
    return context.history


def get_analysis_service(context: AppContext = Depends(get_context)) -> AnalysisService:
    return context.analysis


def get_session_manager(context: AppContext = Depends(get_context)) -> SessionManager:
    return context.sessions


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Extract the bearer token; 401 when missing."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    return credentials.credentials


def get_current_ledger(
    token: str = Depends(get_current_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> Ledger:
    """Provide the ledger of the signed-in session."""
    return sessions.get(token)


def get_current_user(
    token: str = Depends(get_current_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> User:
    """Provide the signed-in user."""
    return sessions.get_user(token)
