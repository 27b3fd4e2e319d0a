#!/usr/bin/env python3
"""Shared plumbing for the Forex, Crypto and Stock endpoint modules.

Endpoint modules never authenticate on their own: they build a parameter
mapping from their arguments and hand it to ``FcsApi.request``.
"""

from typing import TYPE_CHECKING, Any

from fcsapi.utils.config import DEFAULT_HISTORY_LENGTH, DEFAULT_PERIOD

if TYPE_CHECKING:
    from fcsapi.core.fcs_api import FcsApi

__all__ = ["EndpointModule", "compact_params", "flag"]


def compact_params(**params: Any) -> dict[str, Any]:
    """Drop optional arguments that were left unset (None or empty string)."""
    return {key: value for key, value in params.items() if value is not None and value != ""}


def flag(enabled: bool) -> int | None:
    """Send ``1`` for an enabled switch and omit a disabled one."""
    return 1 if enabled else None


class EndpointModule:
    """Base class binding an endpoint group to its client.

    Subclasses set ``BASE`` to the path prefix of their endpoints.
    """

    BASE = ""

    def __init__(self, api: "FcsApi") -> None:
        self._api = api

    def _request(self, endpoint: str, **params: Any) -> dict[str, Any] | None:
        return self._api.request(self.BASE + endpoint, compact_params(**params))

    def get_history(
        self,
        symbol: str,
        period: str = DEFAULT_PERIOD,
        length: int = DEFAULT_HISTORY_LENGTH,
        from_date: str | None = None,
        to_date: str | None = None,
        page: int = 1,
        is_chart: bool = False,
    ) -> dict[str, Any] | None:
        """Get historical prices (OHLCV candles).

        Args:
            symbol: Single symbol, with or without exchange prefix
            period: 1m, 5m, 15m, 1h, 1D ...
            length: Number of candles (max 10000)
            from_date: Start date (YYYY-MM-DD or unix)
            to_date: End date (YYYY-MM-DD or unix)
            page: Page number for pagination
            is_chart: Return chart rows ``[timestamp, o, h, l, c, v]``
        """
        return self._request(
            "history",
            symbol=symbol,
            period=period,
            length=length,
            page=page,
            **{"from": from_date, "to": to_date},
            is_chart=flag(is_chart),
        )

    def get_profile(self, symbol: str) -> dict[str, Any] | None:
        """Get profile details for one or more comma-separated symbols."""
        return self._request("profile", symbol=symbol)

    def get_exchanges(self, type: str | None = None, sub_type: str | None = None) -> dict[str, Any] | None:
        """Get available exchanges/data sources."""
        return self._request("exchanges", type=type, sub_type=sub_type)

    def advanced(self, parameters: dict[str, Any]) -> dict[str, Any] | None:
        """Advanced query with filters, sorting, pagination and merging.

        Parameters are forwarded unchanged apart from dropping ``None`` values.
        """
        return self._api.request(self.BASE + "advance", dict(parameters))

    def multi_url(self, urls: list[str], base_url: str | None = None) -> dict[str, Any] | None:
        """Execute several API endpoints in one call.

        Args:
            urls: Endpoint paths, joined with commas
            base_url: Common URL prefix for the paths
        """
        return self._request("multi_url", url=",".join(urls), base=base_url)

    def _sorted_query(
        self,
        sort_column: str,
        sort_direction: str,
        limit: int,
        period: str,
        **filters: Any,
    ) -> dict[str, Any] | None:
        params = {
            "period": period,
            "sort_by": f"{sort_column}_{sort_direction}",
            "per_page": limit,
            "merge": "latest",
        }
        params.update(compact_params(**filters))
        return self.advanced(params)
