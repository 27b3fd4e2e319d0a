"""FCS API - Forex, Crypto and Stock market data client.

Typed method calls over the FCS REST API (https://fcsapi.com): latest
prices, history, profiles, technical indicators, top movers and advanced
queries.

Key Features:
- **Three auth methods**: access key, IP whitelist, or short-lived HMAC tokens
- **Never raises on request failure**: failures become a ``status: false`` response
- **Sync and async**: ``request`` / ``request_async`` on one client
- **Rich Logging**: configurable logging with loguru

Quick Start:
    >>> from fcsapi import FcsApi, FcsConfig
    >>>
    >>> api = FcsApi(FcsConfig.with_access_key("YOUR_ACCESS_KEY"))
    >>> data = api.forex.get_latest_price("FX:EURUSD")
    >>> if api.is_success():
    ...     print(api.get_response_data())
    ... else:
    ...     print(api.get_error())

Token auth for frontends:
    >>> config = FcsConfig.with_token("YOUR_ACCESS_KEY", "YOUR_PUBLIC_KEY", 3600)
    >>> FcsApi(config).generate_token()
    {'_token': '...', '_expiry': 1764164233, '_public_key': 'YOUR_PUBLIC_KEY'}
"""

__version__ = "0.1.0"

from typing import Any


# Lazy imports keep ``import fcsapi`` cheap for CLI startup
def __getattr__(name: str) -> Any:
    """Lazy import for main package exports."""
    if name == "FcsApi":
        from .core.fcs_api import FcsApi

        return FcsApi
    if name in ("FcsConfig", "AuthMethod", "SignedToken"):
        from .core import auth

        return getattr(auth, name)
    if name == "ApiResponse":
        from .core.response import ApiResponse

        return ApiResponse
    if name in ("ConfigurationError", "FcsApiError"):
        from .utils.for_core import rest_exceptions

        return getattr(rest_exceptions, name)
    if name == "history_to_dataframe":
        from .utils.dataframe_utils import history_to_dataframe

        return history_to_dataframe
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "ApiResponse",
    "AuthMethod",
    "ConfigurationError",
    "FcsApi",
    "FcsApiError",
    "FcsConfig",
    "SignedToken",
    "history_to_dataframe",
]
