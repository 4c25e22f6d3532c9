"""Application context for process-wide service management.

Holds the services that outlive a single request: the fund catalog and
history clients, the valuation service and the sign-in sessions with their
ledgers.
"""

import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from fundfolio.config.settings import Settings, get_settings
from fundfolio.repositories.sqlalchemy import (
    get_session_factory,
    SqlAlchemyWalletRepository,
    SqlAlchemyHoldingRepository,
    SqlAlchemyIntentRepository,
)
from fundfolio.providers import FundDataProvider, MfApiProvider, StubFundDataProvider
from fundfolio.services import (
    AnalysisService,
    CatalogService,
    HistoryService,
    Ledger,
    SessionManager,
)

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to long-lived services.

    Ledgers are built per sign-in session, each with its own database
    session so that one user's failed write never rolls back another's.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[FundDataProvider] = None,
        session_factory: Optional[sessionmaker] = None,
    ):
        self._settings = settings or get_settings()
        self._provider = provider or self._build_provider()
        self._session_factory = session_factory

        self._catalog: Optional[CatalogService] = None
        self._history: Optional[HistoryService] = None
        self._analysis: Optional[AnalysisService] = None
        self._sessions: Optional[SessionManager] = None

    def _build_provider(self) -> FundDataProvider:
        if self._settings.use_stub_provider:
            logger.info("Using stub fund data provider")
            return StubFundDataProvider()
        return MfApiProvider(
            base_url=self._settings.mfapi_base_url,
            timeout_seconds=self._settings.http_timeout_seconds,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def catalog(self) -> CatalogService:
        """Get the CatalogService instance."""
        if self._catalog is None:
            self._catalog = CatalogService(
                provider=self._provider,
                fund_codes=self._settings.fund_codes,
                cache_ttl_seconds=self._settings.catalog_cache_ttl_seconds,
                trailing_return_days=self._settings.trailing_return_days,
            )
        return self._catalog

    @property
    def history(self) -> HistoryService:
        """Get the HistoryService instance."""
        if self._history is None:
            self._history = HistoryService(
                provider=self._provider,
                max_points=self._settings.history_max_points,
                cache_ttl_seconds=self._settings.catalog_cache_ttl_seconds,
            )
        return self._history

    @property
    def analysis(self) -> AnalysisService:
        """Get the AnalysisService instance."""
        if self._analysis is None:
            self._analysis = AnalysisService(catalog_service=self.catalog)
        return self._analysis

    @property
    def sessions(self) -> SessionManager:
        """Get the SessionManager instance."""
        if self._sessions is None:
            self._sessions = SessionManager(ledger_factory=self.build_ledger)
        return self._sessions

    def build_ledger(self, user_id: str) -> Ledger:
        """Create an unloaded ledger bound to a fresh database session."""
        factory = self._session_factory or get_session_factory()
        db = factory()
        return Ledger(
            user_id=user_id,
            wallet_repo=SqlAlchemyWalletRepository(db),
            holding_repo=SqlAlchemyHoldingRepository(db),
            intent_repo=SqlAlchemyIntentRepository(db),
            on_close=db.close,
        )

    def close(self) -> None:
        """Sign everyone out and release the HTTP client."""
        if self._sessions is not None:
            self._sessions.close_all()
        close = getattr(self._provider, "close", None)
        if close:
            close()


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context


def shutdown_app_context() -> None:
    """Close and forget the global application context."""
    global _app_context
    if _app_context is not None:
        _app_context.close()
        _app_context = None
