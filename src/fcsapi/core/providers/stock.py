#!/usr/bin/env python3
"""Stock endpoints: equities, indices and company financials.

Symbols accept an optional exchange prefix (``NASDAQ:AAPL``). Financial
statements take ``duration`` (annual, interim, both) and ``format``
(plain, inherit).
"""

from typing import Any

from fcsapi.core.providers.base import EndpointModule, compact_params
from fcsapi.utils.config import DEFAULT_LIST_LIMIT, DEFAULT_PERIOD, DEFAULT_TOP_LIMIT, STOCK_BASE

__all__ = ["FcsStock"]


class FcsStock(EndpointModule):
    """Stock API module, available as ``FcsApi.stock``."""

    BASE = STOCK_BASE

    # Symbol list / indices

    def get_symbols_list(
        self,
        exchange: str | None = None,
        country: str | None = None,
        sector: str | None = None,
        indices: str | None = None,
    ) -> dict[str, Any] | None:
        """Get the list of stock symbols filtered by exchange, country, sector or index."""
        return self._request("list", exchange=exchange, country=country, sector=sector, indices=indices)

    def get_indices_list(self, country: str | None = None, exchange: str | None = None):
        return self._request("indices", country=country, exchange=exchange)

    def get_indices_latest(
        self,
        symbol: str | None = None,
        country: str | None = None,
        exchange: str | None = None,
    ):
        """Get latest index values (NASDAQ:NDX, SP:SPX ...)."""
        return self._request("indices_latest", symbol=symbol, country=country, exchange=exchange)

    # Latest prices

    def get_latest_price(
        self,
        symbol: str,
        period: str = DEFAULT_PERIOD,
        exchange: str | None = None,
        get_profile: bool = False,
    ) -> dict[str, Any] | None:
        """Get latest prices for symbols such as ``AAPL,MSFT`` or ``NASDAQ:AAPL``.

        ``get_profile`` is always sent for stocks, as ``1`` or ``0``.
        """
        return self._request(
            "latest",
            symbol=symbol,
            period=period,
            get_profile=1 if get_profile else 0,
            exchange=exchange,
        )

    def get_all_prices(self, exchange: str, period: str = DEFAULT_PERIOD):
        return self._request("latest", exchange=exchange, period=period)

    def get_latest_by_country(self, country: str, sector: str | None = None, period: str = DEFAULT_PERIOD):
        return self._request("latest", country=country, period=period, sector=sector)

    def get_latest_by_indices(self, indices: str, period: str = DEFAULT_PERIOD):
        """Latest prices of every constituent of one or more indices (NASDAQ:NDX)."""
        return self._request("latest", indices=indices, period=period)

    # Financial data

    def get_earnings(self, symbol: str, duration: str = "both"):
        return self._request("earnings", symbol=symbol, duration=duration)

    def get_revenue(self, symbol: str):
        return self._request("revenue", symbol=symbol)

    def get_dividends(self, symbol: str, format: str = "plain"):
        return self._request("dividend", symbol=symbol, format=format)

    def get_balance_sheet(self, symbol: str, duration: str = "annual", format: str = "plain"):
        return self._request("balance_sheet", symbol=symbol, duration=duration, format=format)

    def get_income_statements(self, symbol: str, duration: str = "annual", format: str = "plain"):
        return self._request("income_statements", symbol=symbol, duration=duration, format=format)

    def get_cash_flow(self, symbol: str, duration: str = "annual", format: str = "plain"):
        return self._request("cash_flow", symbol=symbol, duration=duration, format=format)

    def get_statistics(self, symbol: str, duration: str = "annual"):
        return self._request("statistics", symbol=symbol, duration=duration)

    def get_forecast(self, symbol: str):
        """Analyst price targets and recommendations."""
        return self._request("forecast", symbol=symbol)

    def get_stock_data(
        self,
        symbol: str,
        data_column: str = "profile,earnings,dividends",
        duration: str = "annual",
        format: str = "plain",
    ) -> dict[str, Any] | None:
        """Several datasets for one symbol in a single call.

        Args:
            symbol: Stock symbol
            data_column: Comma-separated datasets (profile, earnings, dividends,
                balance_sheet, income_statements, cash_flow, statistics, forecast)
            duration: annual, interim or both
            format: plain or inherit
        """
        return self._request(
            "stock_data", symbol=symbol, data_column=data_column, duration=duration, format=format
        )

    # Technical analysis

    def get_moving_averages(self, symbol: str, period: str = DEFAULT_PERIOD):
        return self._request("ma_avg", symbol=symbol, period=period)

    def get_indicators(self, symbol: str, period: str = DEFAULT_PERIOD):
        return self._request("indicators", symbol=symbol, period=period)

    def get_pivot_points(self, symbol: str, period: str = DEFAULT_PERIOD):
        return self._request("pivot_points", symbol=symbol, period=period)

    def get_performance(self, symbol: str):
        return self._request("performance", symbol=symbol)

    # Top movers

    def get_top_gainers(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        country: str | None = None,
    ):
        return self.get_sorted_data("active.chp", "desc", limit, exchange, country, period)

    def get_top_losers(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        country: str | None = None,
    ):
        return self.get_sorted_data("active.chp", "asc", limit, exchange, country, period)

    def get_most_active(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        country: str | None = None,
    ):
        return self.get_sorted_data("active.v", "desc", limit, exchange, country, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = DEFAULT_TOP_LIMIT,
        exchange: str | None = None,
        country: str | None = None,
        period: str = DEFAULT_PERIOD,
    ) -> dict[str, Any] | None:
        """Get latest data sorted on any column.

        Args:
            sort_column: active.c, active.chp, active.v, active.h, active.l
            sort_direction: asc or desc
            limit: Number of results
            exchange: NASDAQ, NYSE ...
            country: united-states, japan ...
            period: Time period
        """
        return self._sorted_query(
            sort_column, sort_direction, limit, period, exchange=exchange, country=country
        )

    # Search / filters

    def search(self, query: str, exchange: str | None = None, country: str | None = None):
        return self._request("list", search=query, exchange=exchange, country=country)

    def get_by_sector(self, sector: str, limit: int = DEFAULT_LIST_LIMIT, exchange: str | None = None):
        params = {"sector": sector, "per_page": limit, "merge": "latest"}
        params.update(compact_params(exchange=exchange))
        return self.advanced(params)

    def get_by_country(self, country: str, limit: int = DEFAULT_LIST_LIMIT, exchange: str | None = None):
        params = {"country": country, "per_page": limit, "merge": "latest"}
        params.update(compact_params(exchange=exchange))
        return self.advanced(params)
