"""Endpoint modules grouped by market.

Each module maps one method to one remote endpoint and forwards its
parameters to ``FcsApi.request``:

    >>> from fcsapi import FcsApi
    >>> api = FcsApi("YOUR_ACCESS_KEY")
    >>> api.forex.get_history("EURUSD", period="1h", length=500)
    >>> api.crypto.get_top_by_market_cap(limit=10)
    >>> api.stock.get_earnings("NASDAQ:AAPL")
"""

from fcsapi.core.providers.base import EndpointModule, compact_params, flag
from fcsapi.core.providers.crypto import FcsCrypto
from fcsapi.core.providers.forex import FcsForex
from fcsapi.core.providers.stock import FcsStock

__all__ = [
    "EndpointModule",
    "FcsCrypto",
    "FcsForex",
    "FcsStock",
    "compact_params",
    "flag",
]
