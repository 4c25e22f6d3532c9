"""Provider backed by the public api.mfapi.in price API."""

import logging
from typing import Any, Optional

import requests
from requests.exceptions import RequestException

from fundfolio.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class MfApiProvider:
    """
    Fetches scheme payloads from api.mfapi.in.

    GET {base_url}/mf/{code} returns scheme metadata plus the full NAV
    history, newest first.
    """

    def __init__(
        self,
        base_url: str = "https://api.mfapi.in",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def get_scheme(self, fund_id: str) -> dict[str, Any]:
        """Fetch metadata and NAV history for one scheme code."""
        url = f"{self._base_url}/mf/{fund_id}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except RequestException as exc:
            logger.warning("Price API request for %s failed: %s", fund_id, exc)
            raise ProviderError(f"Request for fund {fund_id} failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(f"Invalid JSON for fund {fund_id}") from exc

        if not isinstance(payload, dict):
            raise ProviderError(f"Unexpected payload for fund {fund_id}")
        status = payload.get("status")
        if status is not None and str(status).upper() != "SUCCESS":
            raise ProviderError(f"Price API reported status {status} for fund {fund_id}")
        return payload

    def close(self) -> None:
        self._session.close()
