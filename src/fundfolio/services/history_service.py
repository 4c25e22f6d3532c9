"""NAV history service for fund detail charts."""

import logging
from datetime import datetime

from fundfolio.core.exceptions import HistoryUnavailableError, ProviderError
from fundfolio.core.timezone import now_ist
from fundfolio.domain.models import NavPoint
from fundfolio.providers.fund_data_provider import FundDataProvider
from fundfolio.services.fund_normalizer import parse_nav_history

logger = logging.getLogger(__name__)


class HistoryService:
    """Fetches a fund's NAV series, oldest to newest, with a per-fund TTL cache."""

    def __init__(
        self,
        provider: FundDataProvider,
        max_points: int = 365,
        cache_ttl_seconds: int = 300,
    ):
        self._provider = provider
        self._max_points = max_points
        self._cache_ttl = cache_ttl_seconds
        self._cache: dict[str, tuple[list[NavPoint], datetime]] = {}

    def get_history(self, fund_id: str) -> list[NavPoint]:
        """
        Return up to ``max_points`` most recent NAV points, oldest first.

        Raises HistoryUnavailableError when the provider fails.
        """
        cached = self._cache.get(fund_id)
        if cached and (now_ist() - cached[1]).total_seconds() < self._cache_ttl:
            return list(cached[0])

        try:
            payload = self._provider.get_scheme(fund_id)
            points = parse_nav_history(payload)
        except (ProviderError, ValueError) as exc:
            logger.warning("History for fund %s unavailable: %s", fund_id, exc)
            raise HistoryUnavailableError(fund_id) from exc

        if self._max_points > 0:
            points = points[-self._max_points:]
        self._cache[fund_id] = (points, now_ist())
        return list(points)
