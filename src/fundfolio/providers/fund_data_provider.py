"""Fund data provider protocol."""

from typing import Any, Protocol


class FundDataProvider(Protocol):
    """
    Protocol for mutual fund price providers.

    Implementations return the provider's raw scheme payload in the
    api.mfapi.in shape: ``{"meta": {...}, "data": [{"date", "nav"}, ...]}``
    with NAV entries newest first. Normalization happens in the services.
    """

    def get_scheme(self, fund_id: str) -> dict[str, Any]:
        """
        Fetch metadata and NAV history for one scheme code.

        Raises ProviderError when the request fails.
        """
        ...
