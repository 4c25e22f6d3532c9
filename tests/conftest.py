"""
Pytest configuration and fixtures for the fund portfolio tracker tests.

This module provides:
- In-memory SQLite database fixtures
- Deterministic fund data providers (fixed NAV histories, failing codes)
- Repository wrappers that fail on chosen methods
- Ledger, service and API client fixtures
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from fundfolio.main import app
from fundfolio.api.deps import get_context
from fundfolio.app_context import AppContext
from fundfolio.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from fundfolio.repositories.sqlalchemy import orm_models  # noqa: F401
from fundfolio.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyWalletRepository,
    SqlAlchemyHoldingRepository,
    SqlAlchemyIntentRepository,
)
from fundfolio.config.settings import Settings, set_settings, reset_settings
from fundfolio.core.exceptions import ProviderError, StoreError
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import Fund, User
from fundfolio.services import (
    AnalysisService,
    AuthService,
    CatalogService,
    HistoryService,
    Ledger,
)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_session(session_factory) -> Session:
    """Create test database session."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def wallet_repo(test_session) -> SqlAlchemyWalletRepository:
    """Provide test WalletRepository."""
    return SqlAlchemyWalletRepository(test_session)


@pytest.fixture
def holding_repo(test_session) -> SqlAlchemyHoldingRepository:
    """Provide test HoldingRepository."""
    return SqlAlchemyHoldingRepository(test_session)


@pytest.fixture
def intent_repo(test_session) -> SqlAlchemyIntentRepository:
    """Provide test IntentRepository."""
    return SqlAlchemyIntentRepository(test_session)


class FlakyRepository:
    """
    Wraps a repository and raises StoreError from the methods named in
    ``failing``. Everything else is passed through.
    """

    def __init__(self, inner: Any):
        self._inner = inner
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self._grace: dict[str, int] = {}

    def fail(self, name: str, after: int = 0) -> None:
        """Fail every call to ``name`` once ``after`` calls have succeeded."""
        self.failing.add(name)
        self._grace[name] = after

    def __getattr__(self, name: str):
        attr = getattr(self._inner, name)
        if not callable(attr):
            return attr

        def call(*args, **kwargs):
            self.calls.append(name)
            if name in self.failing and self._grace.get(name, 0) > 0:
                self._grace[name] -= 1
            elif name in self.failing:
                raise StoreError(f"Failed to {name}")
            return attr(*args, **kwargs)

        return call


@pytest.fixture
def flaky_wallets(wallet_repo) -> FlakyRepository:
    return FlakyRepository(wallet_repo)


@pytest.fixture
def flaky_holdings(holding_repo) -> FlakyRepository:
    return FlakyRepository(holding_repo)


@pytest.fixture
def flaky_intents(intent_repo) -> FlakyRepository:
    return FlakyRepository(intent_repo)


# =============================================================================
# FUND DATA PROVIDERS
# =============================================================================


def fund(fund_id: str = "100001", nav: str = "100", name: Optional[str] = None, **kwargs) -> Fund:
    """Build a Fund snapshot for ledger tests."""
    return Fund(
        fund_id=fund_id,
        name=name or f"Test Fund {fund_id}",
        nav=Decimal(nav),
        **kwargs,
    )


def scheme_payload(
    fund_id: str,
    name: str,
    navs: list[str],
    end: date = date(2026, 10, 16),
    category: str = "Equity Scheme - Large Cap Fund",
) -> dict[str, Any]:
    """
    Build an mfapi-shaped payload.

    ``navs`` is oldest first, one per calendar day ending at ``end``; the
    payload lists them newest first like the real API.
    """
    start = end - timedelta(days=len(navs) - 1)
    data = [
        {"date": (start + timedelta(days=i)).strftime("%d-%m-%Y"), "nav": nav}
        for i, nav in enumerate(navs)
    ]
    data.reverse()
    return {
        "meta": {
            "fund_house": "Test Mutual Fund",
            "scheme_type": "Open Ended Schemes",
            "scheme_category": category,
            "scheme_code": int(fund_id),
            "scheme_name": name,
        },
        "data": data,
        "status": "SUCCESS",
    }


class DeterministicFundProvider:
    """
    Deterministic fund data provider for testing.

    Serves fixed NAV histories; codes listed in ``failing`` raise
    ProviderError. ``set_nav`` appends a newer NAV point.
    """

    def __init__(self):
        self.histories: dict[str, tuple[str, list[str]]] = {
            "100001": ("Alpha Large Cap Fund - Direct Growth", ["80.0000", "90.0000", "100.0000"]),
            "100002": ("Beta Debt Fund - Direct Growth", ["50.0000", "50.5000", "51.0000"]),
            "100003": ("Gamma Small Cap Fund - Direct Growth", ["20.0000"]),
        }
        self.failing: set[str] = set()
        self.calls: list[str] = []

    def get_scheme(self, fund_id: str) -> dict[str, Any]:
        self.calls.append(fund_id)
        if fund_id in self.failing or fund_id not in self.histories:
            raise ProviderError(f"Failed to fetch scheme {fund_id}")
        name, navs = self.histories[fund_id]
        return scheme_payload(fund_id, name, navs)

    def set_nav(self, fund_id: str, nav: str) -> None:
        name, navs = self.histories[fund_id]
        self.histories[fund_id] = (name, navs + [nav])


FUND_CODES = ["100001", "100002", "100003"]


@pytest.fixture
def deterministic_provider() -> DeterministicFundProvider:
    """Provide deterministic fund data provider."""
    return DeterministicFundProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(user_repo) -> Callable[..., User]:
    """Factory fixture for users (foreign key owner of wallets and holdings)."""
    counter = {"n": 0}

    def _create_user(email: Optional[str] = None) -> User:
        counter["n"] += 1
        return user_repo.create(
            User(
                user_id=f"user-{counter['n']}",
                email=email or f"user{counter['n']}@example.com",
                password_hash="x",
                created_at=now_ist(),
            )
        )

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    return user_factory()


@pytest.fixture
def ledger_factory(
    flaky_wallets, flaky_holdings, flaky_intents
) -> Callable[[str], Ledger]:
    """Build loaded ledgers over the (optionally failing) test repositories."""

    def _create_ledger(user_id: str) -> Ledger:
        ledger = Ledger(
            user_id=user_id,
            wallet_repo=flaky_wallets,
            holding_repo=flaky_holdings,
            intent_repo=flaky_intents,
        )
        ledger.load()
        return ledger

    return _create_ledger


@pytest.fixture
def ledger(ledger_factory, user) -> Ledger:
    """Loaded ledger for a user with an empty wallet."""
    return ledger_factory(user.user_id)


@pytest.fixture
def funded_ledger(ledger) -> Ledger:
    """Ledger with ₹10,000 in the wallet."""
    assert ledger.deposit(Decimal("10000"))
    return ledger


@pytest.fixture
def catalog_service(deterministic_provider) -> CatalogService:
    return CatalogService(
        provider=deterministic_provider,
        fund_codes=FUND_CODES,
        cache_ttl_seconds=300,
        trailing_return_days=2,
    )


@pytest.fixture
def history_service(deterministic_provider) -> HistoryService:
    return HistoryService(provider=deterministic_provider, max_points=365)


@pytest.fixture
def analysis_service(catalog_service) -> AnalysisService:
    return AnalysisService(catalog_service=catalog_service)


@pytest.fixture
def auth_service(user_repo, wallet_repo) -> AuthService:
    return AuthService(user_repo=user_repo, wallet_repo=wallet_repo)


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(session_factory, deterministic_provider) -> AppContext:
    """Application context bound to the test database and provider."""
    settings = Settings(
        database_url="sqlite://",
        fund_codes=FUND_CODES,
        trailing_return_days=2,
    )
    context = AppContext(
        settings=settings,
        provider=deterministic_provider,
        session_factory=session_factory,
    )
    yield context
    context.close()


@pytest.fixture
def client(session_factory, app_context) -> TestClient:
    """Provide FastAPI test client with test database and services."""
    set_settings(Settings(database_url="sqlite://", use_stub_provider=True))
    reset_database()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_context] = lambda: app_context
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


def register(client: TestClient, email: str = "investor@example.com", password: str = "secret123") -> dict:
    """Register a user and return the Authorization header for the session."""
    response = client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client) -> dict:
    """Authorization header of a freshly registered user."""
    return register(client)


@pytest.fixture
def funded_headers(client, auth_headers) -> dict:
    """Authorization header of a user with ₹10,000 in the wallet."""
    response = client.post("/wallet/deposit", json={"amount": "10000"}, headers=auth_headers)
    assert response.status_code == 200, response.text
    return auth_headers
