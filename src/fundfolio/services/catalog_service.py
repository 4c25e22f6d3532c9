"""Fund catalog service."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Optional

from fundfolio.core.exceptions import CatalogUnavailableError, NotFoundError, ProviderError
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import Fund
from fundfolio.providers.fund_data_provider import FundDataProvider
from fundfolio.services.fund_normalizer import normalize_fund

logger = logging.getLogger(__name__)

MAX_FETCH_WORKERS = 8


class CatalogService:
    """
    Service for the browsable fund catalog.

    Loads a fixed list of scheme codes from the provider, one request per
    fund. A fund that fails to load is dropped from the snapshot; the load
    only fails when no fund could be loaded and there is no earlier snapshot
    to fall back to.
    """

    def __init__(
        self,
        provider: FundDataProvider,
        fund_codes: list[str],
        cache_ttl_seconds: int = 300,
        trailing_return_days: int = 252,
    ):
        self._provider = provider
        self._fund_codes = list(fund_codes)
        self._cache_ttl = cache_ttl_seconds
        self._lookback = trailing_return_days
        self._funds: dict[str, Fund] = {}
        self._cache_time: Optional[datetime] = None
        self._lock = threading.Lock()

    def get_funds(self, refresh: bool = False) -> list[Fund]:
        """Return the catalog in configured order, reloading when stale."""
        with self._lock:
            if refresh or not self._is_cache_valid():
                self._load()
            return list(self._funds.values())

    def get_fund_map(self) -> dict[str, Fund]:
        """Return the catalog keyed by fund ID."""
        return {fund.fund_id: fund for fund in self.get_funds()}

    def get_fund(self, fund_id: str) -> Fund:
        """Get one fund from the current snapshot."""
        fund = self.get_fund_map().get(fund_id)
        if fund is None:
            raise NotFoundError("Fund", fund_id)
        return fund

    def search(self, term: Optional[str] = None) -> list[Fund]:
        """Case-insensitive name search over the catalog."""
        funds = self.get_funds()
        needle = (term or "").strip().lower()
        if not needle:
            return funds
        return [f for f in funds if needle in f.name.lower()]

    def _load(self) -> None:
        """Fetch every configured fund; keep whatever loaded."""
        if not self._fund_codes:
            self._funds = {}
            self._cache_time = now_ist()
            return

        workers = min(MAX_FETCH_WORKERS, len(self._fund_codes))
        with ThreadPoolExecutor(max_workers=workers) as ex:
            results = list(ex.map(self._fetch_one, self._fund_codes))

        loaded = {fund.fund_id: fund for fund in results if fund is not None}
        if not loaded:
            if self._funds:
                logger.warning("Catalog refresh failed for every fund; serving stale snapshot")
                return
            raise CatalogUnavailableError()

        dropped = len(self._fund_codes) - len(loaded)
        if dropped:
            logger.info("Catalog loaded %d funds, dropped %d", len(loaded), dropped)
        self._funds = loaded
        self._cache_time = now_ist()

    def _fetch_one(self, fund_id: str) -> Optional[Fund]:
        try:
            payload = self._provider.get_scheme(fund_id)
            return normalize_fund(fund_id, payload, self._lookback)
        except (ProviderError, ValueError) as exc:
            logger.warning("Dropping fund %s from catalog: %s", fund_id, exc)
            return None

    def _is_cache_valid(self) -> bool:
        """Check if cache is within TTL."""
        if not self._cache_time:
            return False
        elapsed = (now_ist() - self._cache_time).total_seconds()
        return elapsed < self._cache_ttl
