"""Business logic services."""

from fundfolio.services.catalog_service import CatalogService
from fundfolio.services.history_service import HistoryService
from fundfolio.services.ledger import Ledger
from fundfolio.services.analysis_service import AnalysisService
from fundfolio.services.auth_service import AuthService
from fundfolio.services.session_manager import SessionManager

__all__ = [
    "CatalogService",
    "HistoryService",
    "Ledger",
    "AnalysisService",
    "AuthService",
    "SessionManager",
]
