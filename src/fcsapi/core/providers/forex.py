#!/usr/bin/env python3
"""Forex endpoints: currency pairs and commodities.

Symbols accept an optional exchange prefix (``FX:EURUSD``). Exchanges
include FX, ONA, SFO and FCM.
"""

from typing import Any

from fcsapi.core.providers.base import EndpointModule, flag
from fcsapi.utils.config import DEFAULT_PERIOD, DEFAULT_TOP_LIMIT, FOREX_BASE

__all__ = ["FcsForex"]


class FcsForex(EndpointModule):
    """Forex API module, available as ``FcsApi.forex``."""

    BASE = FOREX_BASE

    # Symbol list

    def get_symbols_list(
        self,
        type: str | None = None,
        sub_type: str | None = None,
        exchange: str | None = None,
    ) -> dict[str, Any] | None:
        """Get the list of forex symbols.

        Args:
            type: forex or commodity
            sub_type: spot or synthetic
            exchange: FX, ONA, SFO, FCM
        """
        return self._request("list", type=type, sub_type=sub_type, exchange=exchange)

    # Latest prices

    def get_latest_price(
        self,
        symbol: str,
        period: str = DEFAULT_PERIOD,
        type: str | None = None,
        exchange: str | None = None,
        get_profile: bool = False,
    ) -> dict[str, Any] | None:
        """Get latest prices for comma-separated symbols (EURUSD,GBPUSD).

        Args:
            symbol: Symbol(s), e.g. ``EURUSD,GBPUSD`` or ``FX:EURUSD``
            period: 1m, 5m, 15m, 30m, 1h, 4h, 1D, 1W, 1M
            type: forex or commodity
            exchange: Exchange name
            get_profile: Include profile info
        """
        return self._request(
            "latest",
            symbol=symbol,
            period=period,
            type=type,
            exchange=exchange,
            get_profile=flag(get_profile),
        )

    def get_all_prices(self, exchange: str, period: str = DEFAULT_PERIOD, type: str | None = None):
        """Get all latest prices of one exchange."""
        return self._request("latest", exchange=exchange, period=period, type=type)

    # Commodities

    def get_commodities(self, symbol: str | None = None, period: str = DEFAULT_PERIOD):
        """Get commodity prices: XAUUSD, XAGUSD, USOIL, BRENT, NGAS."""
        return self._request("latest", type="commodity", period=period, symbol=symbol)

    def get_commodity_symbols(self):
        return self.get_symbols_list("commodity")

    # Currency converter

    def convert(self, pair1: str, pair2: str, amount: float = 1, type: str | None = None):
        """Convert ``amount`` of ``pair1`` (EUR) into ``pair2`` (USD)."""
        return self._request("converter", pair1=pair1, pair2=pair2, amount=amount, type=type)

    # Base / cross currency

    def get_base_prices(
        self,
        symbol: str,
        type: str = "forex",
        exchange: str | None = None,
        fallback: bool = False,
    ) -> dict[str, Any] | None:
        """Get prices of one base currency against all others.

        Args:
            symbol: Single currency code (USD, EUR, JPY), not a pair
            type: forex or crypto
            exchange: Exchange filter
            fallback: Fetch from other exchanges when not found
        """
        return self._request(
            "base_latest", symbol=symbol, type=type, exchange=exchange, fallback=flag(fallback)
        )

    def get_cross_rates(
        self,
        symbol: str,
        exchange: str | None = None,
        type: str = "forex",
        period: str = DEFAULT_PERIOD,
        crossrates: bool = False,
        fallback: bool = False,
    ) -> dict[str, Any] | None:
        """Get cross rates with OHLC data for every pair of a base currency.

        Args:
            symbol: Single currency (USD, EUR, JPY)
            exchange: Exchange filter
            type: forex or crypto
            period: Time period
            crossrates: Return pairwise cross rates between multiple symbols
            fallback: Fetch from other exchanges when not found
        """
        return self._request(
            "cross",
            symbol=symbol,
            type=type,
            period=period,
            exchange=exchange,
            crossrates=flag(crossrates),
            fallback=flag(fallback),
        )

    # Technical analysis

    def get_moving_averages(self, symbol: str, period: str = DEFAULT_PERIOD, exchange: str | None = None):
        """Get EMA and SMA moving averages."""
        return self._request("ma_avg", symbol=symbol, period=period, exchange=exchange)

    def get_indicators(self, symbol: str, period: str = DEFAULT_PERIOD, exchange: str | None = None):
        """Get technical indicators (RSI, MACD, Stochastic, ADX, ATR ...)."""
        return self._request("indicators", symbol=symbol, period=period, exchange=exchange)

    def get_pivot_points(self, symbol: str, period: str = DEFAULT_PERIOD, exchange: str | None = None):
        """Get pivot points (Classic, Fibonacci, Camarilla, Woodie, Demark)."""
        return self._request("pivot_points", symbol=symbol, period=period, exchange=exchange)

    def get_performance(self, symbol: str, exchange: str | None = None):
        """Get historical highs/lows, percentage changes and volatility."""
        return self._request("performance", symbol=symbol, exchange=exchange)

    # Economy calendar

    def get_economy_calendar(
        self,
        symbol: str | None = None,
        country: str | None = None,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> dict[str, Any] | None:
        """Get economic calendar events, filtered by currency or country (US, GB, DE, JP)."""
        return self._request(
            "economy_cal", symbol=symbol, country=country, **{"from": from_date, "to": to_date}
        )

    # Top movers

    def get_top_gainers(
        self,
        type: str = "forex",
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        exchange: str | None = None,
    ):
        return self.get_sorted_data("active.chp", "desc", limit, type, exchange, period)

    def get_top_losers(
        self,
        type: str = "forex",
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        exchange: str | None = None,
    ):
        return self.get_sorted_data("active.chp", "asc", limit, type, exchange, period)

    def get_most_active(
        self,
        type: str = "forex",
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        exchange: str | None = None,
    ):
        """Most active symbols by volume."""
        return self.get_sorted_data("active.v", "desc", limit, type, exchange, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = DEFAULT_TOP_LIMIT,
        type: str | None = "forex",
        exchange: str | None = None,
        period: str = DEFAULT_PERIOD,
    ) -> dict[str, Any] | None:
        """Get latest data sorted on any column.

        Args:
            sort_column: active.c, active.chp, active.v, active.h, active.l
            sort_direction: asc or desc
            limit: Number of results
            type: forex or commodity
            exchange: FX, ONA, SFO
            period: Time period
        """
        return self._sorted_query(sort_column, sort_direction, limit, period, type=type, exchange=exchange)

    # Search

    def search(self, query: str, type: str | None = None, exchange: str | None = None):
        """Search symbols by term (EUR, USD, gold)."""
        return self._request("search", search=query, type=type, exchange=exchange)
