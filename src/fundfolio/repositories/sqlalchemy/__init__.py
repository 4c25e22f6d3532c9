"""SQLAlchemy repository implementations."""

from fundfolio.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    store_errors,
    Base,
)
from fundfolio.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from fundfolio.repositories.sqlalchemy.wallet_repo import SqlAlchemyWalletRepository
from fundfolio.repositories.sqlalchemy.holding_repo import SqlAlchemyHoldingRepository
from fundfolio.repositories.sqlalchemy.intent_repo import SqlAlchemyIntentRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "store_errors",
    "Base",
    "SqlAlchemyUserRepository",
    "SqlAlchemyWalletRepository",
    "SqlAlchemyHoldingRepository",
    "SqlAlchemyIntentRepository",
]
