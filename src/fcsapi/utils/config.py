#!/usr/bin/env python
"""Centralized configuration for the FCS API client.

Constants for the API host, authentication defaults, HTTP client settings and
the environment variables read by ``FcsConfig.from_env``.
"""

import os
import platform
from typing import Final

# API host
BASE_URL: Final[str] = "https://api-v4.fcsapi.com/"

# Endpoint module base paths
FOREX_BASE: Final[str] = "forex/"
CRYPTO_BASE: Final[str] = "crypto/"
STOCK_BASE: Final[str] = "stock/"

# Authentication defaults
DEFAULT_AUTH_METHOD: Final[str] = "access_key"
DEFAULT_TOKEN_EXPIRY_SECONDS: Final[int] = 3600
# Token lifetimes documented by the API (5min, 15min, 30min, 1hr, 24hr)
ALLOWED_TOKEN_EXPIRY_SECONDS: Final[frozenset[int]] = frozenset({300, 900, 1800, 3600, 86400})

# HTTP client configuration
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_CONNECT_TIMEOUT_SECONDS: Final[float] = 5.0
DEFAULT_ACCEPT_HEADER: Final[str] = "application/json"
DEFAULT_USER_AGENT: Final[str] = f"fcsapi-python/0.1 Python/{platform.python_version()}"

# Synthetic failure response
REQUEST_ERROR_PREFIX: Final[str] = "Request Error: "
UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error"

# Default query values shared by the endpoint modules
DEFAULT_PERIOD: Final[str] = "1D"
DEFAULT_HISTORY_LENGTH: Final[int] = 300
DEFAULT_TOP_LIMIT: Final[int] = 20
DEFAULT_LIST_LIMIT: Final[int] = 100

# Environment configuration
ENV_AUTH_METHOD: Final[str] = "FCS_API_AUTH_METHOD"
ENV_ACCESS_KEY: Final[str] = "FCS_API_ACCESS_KEY"
ENV_PUBLIC_KEY: Final[str] = "FCS_API_PUBLIC_KEY"
ENV_TOKEN_EXPIRY: Final[str] = "FCS_API_TOKEN_EXPIRY"
ENV_TIMEOUT: Final[str] = "FCS_API_TIMEOUT"
ENV_CONNECT_TIMEOUT: Final[str] = "FCS_API_CONNECT_TIMEOUT"


def _parse_int_env(env_var: str, default: int) -> int:
    """Parse an integer from an environment variable with fallback to default.

    Args:
        env_var: Environment variable name to check
        default: Default value if env var is unset or blank

    Returns:
        Integer value from environment or default

    Raises:
        ValueError: If the variable is set but is not an integer
    """
    env_value = os.getenv(env_var)
    if env_value is None or not env_value.strip():
        return default
    try:
        return int(env_value.strip())
    except ValueError as e:
        raise ValueError(f"{env_var} must be an integer, got {env_value!r}") from e


def _parse_float_env(env_var: str, default: float) -> float:
    """Parse a float from an environment variable with fallback to default."""
    env_value = os.getenv(env_var)
    if env_value is None or not env_value.strip():
        return default
    try:
        return float(env_value.strip())
    except ValueError as e:
        raise ValueError(f"{env_var} must be a number, got {env_value!r}") from e
