#!/usr/bin/env python
"""HTTP client factory functions."""

from __future__ import annotations

from typing import Any

import httpx
from httpx import Limits, Timeout

from fcsapi.utils.config import (
    DEFAULT_ACCEPT_HEADER,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from fcsapi.utils.loguru_setup import logger

__all__ = [
    "build_timeout",
    "create_async_client",
    "create_client",
    "default_headers",
    "safely_close_client",
]


def build_timeout(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
) -> Timeout:
    """Build an httpx Timeout with a separate connect limit.

    Args:
        timeout: Read, write and pool timeout in seconds
        connect_timeout: Connection establishment timeout in seconds

    Returns:
        httpx.Timeout instance
    """
    return Timeout(timeout, connect=connect_timeout)


def default_headers() -> dict[str, str]:
    return {
        "User-Agent": DEFAULT_USER_AGENT,
        "Accept": DEFAULT_ACCEPT_HEADER,
    }


def _client_kwargs(
    timeout: float,
    connect_timeout: float,
    max_connections: int,
    headers: dict[str, str] | None,
) -> dict[str, Any]:
    return {
        "timeout": build_timeout(timeout, connect_timeout),
        "limits": Limits(
            max_connections=max_connections,
            max_keepalive_connections=max(1, max_connections // 2),
        ),
        "headers": headers if headers is not None else default_headers(),
        "follow_redirects": True,
    }


def create_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    max_connections: int = 10,
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> httpx.Client:
    """Create a synchronous httpx Client for API requests.

    Args:
        timeout: Request timeout in seconds
        connect_timeout: Connection timeout in seconds
        max_connections: Maximum number of pooled connections
        headers: Optional headers to include in all requests
        **kwargs: Additional keyword arguments passed to httpx.Client
            (for example ``transport`` in tests)

    Returns:
        httpx.Client: An initialized HTTP client
    """
    client = httpx.Client(**_client_kwargs(timeout, connect_timeout, max_connections, headers), **kwargs)
    logger.debug(f"Created httpx Client with timeout={timeout}s, connect_timeout={connect_timeout}s")
    return client


def create_async_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
    max_connections: int = 10,
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> httpx.AsyncClient:
    """Create an httpx AsyncClient for awaited API requests.

    Takes the same arguments as :func:`create_client`.
    """
    client = httpx.AsyncClient(**_client_kwargs(timeout, connect_timeout, max_connections, headers), **kwargs)
    logger.debug(f"Created httpx AsyncClient with timeout={timeout}s, connect_timeout={connect_timeout}s")
    return client


def safely_close_client(client: httpx.Client | None) -> None:
    """Close a synchronous HTTP client, logging instead of raising on OS errors.

    Args:
        client: HTTP client to close
    """
    if client is None:
        return

    try:
        client.close()
        logger.debug("HTTP client closed successfully")
    except OSError as e:
        logger.warning(f"Error while closing HTTP client: {e}")
