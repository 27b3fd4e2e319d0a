#!/usr/bin/env python
"""Network utilities subpackage: httpx client construction and cleanup."""

from fcsapi.utils.network.client_factory import (
    build_timeout,
    create_async_client,
    create_client,
    default_headers,
    safely_close_client,
)

__all__ = [
    "build_timeout",
    "create_async_client",
    "create_client",
    "default_headers",
    "safely_close_client",
]
