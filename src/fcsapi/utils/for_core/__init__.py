"""Helpers used by the core client."""

from fcsapi.utils.for_core.rest_exceptions import (
    ConfigurationError,
    FcsApiError,
    HTTPError,
    JSONDecodeError,
    NetworkError,
    RestAPIError,
    RestTimeoutError,
)

__all__ = [
    "ConfigurationError",
    "FcsApiError",
    "HTTPError",
    "JSONDecodeError",
    "NetworkError",
    "RestAPIError",
    "RestTimeoutError",
]
