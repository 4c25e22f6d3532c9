"""Fund data providers module."""

from fundfolio.providers.fund_data_provider import FundDataProvider
from fundfolio.providers.mfapi_provider import MfApiProvider
from fundfolio.providers.stub_provider import StubFundDataProvider

__all__ = [
    "FundDataProvider",
    "MfApiProvider",
    "StubFundDataProvider",
]
