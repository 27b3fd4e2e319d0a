#!/usr/bin/env python3
"""Crypto endpoints: trading pairs, coins, market cap and rank data.

Symbols accept an optional exchange prefix (``BINANCE:BTCUSDT``). The
``type`` filter takes crypto, coin, futures, dex or dominance.
"""

from typing import Any

from fcsapi.core.providers.base import EndpointModule, compact_params, flag
from fcsapi.utils.config import CRYPTO_BASE, DEFAULT_LIST_LIMIT, DEFAULT_PERIOD, DEFAULT_TOP_LIMIT

__all__ = ["FcsCrypto"]


class FcsCrypto(EndpointModule):
    """Crypto API module, available as ``FcsApi.crypto``."""

    BASE = CRYPTO_BASE

    # Symbol list

    def get_symbols_list(
        self,
        type: str | None = "crypto",
        sub_type: str | None = None,
        exchange: str | None = None,
    ) -> dict[str, Any] | None:
        """Get the list of crypto symbols.

        Args:
            type: crypto, coin, futures, dex, dominance
            sub_type: spot, swap, index
            exchange: BINANCE, COINBASE ...
        """
        return self._request("list", type=type, sub_type=sub_type, exchange=exchange)

    def get_coins_list(self):
        """Coins with market cap, rank and supply data."""
        return self.get_symbols_list("coin")

    # Latest prices

    def get_latest_price(
        self,
        symbol: str,
        period: str = DEFAULT_PERIOD,
        type: str | None = None,
        exchange: str | None = None,
        get_profile: bool = False,
    ) -> dict[str, Any] | None:
        """Get latest prices for symbols such as ``BTCUSDT,ETHUSDT`` or ``BINANCE:BTCUSDT``."""
        return self._request(
            "latest",
            symbol=symbol,
            period=period,
            type=type,
            exchange=exchange,
            get_profile=flag(get_profile),
        )

    def get_all_prices(self, exchange: str, period: str = DEFAULT_PERIOD, type: str | None = None):
        """Get all latest prices of one exchange (BINANCE, COINBASE, KRAKEN)."""
        return self._request("latest", exchange=exchange, period=period, type=type)

    # Coin data (rank, market cap, supply)

    def get_coin_data(
        self,
        symbol: str | None = None,
        limit: int = DEFAULT_LIST_LIMIT,
        sort_by: str = "perf.rank_asc",
    ) -> dict[str, Any] | None:
        """Get coin rank, market cap, supply and performance (type=coin only).

        Args:
            symbol: Coin symbol such as BTCUSD (optional)
            limit: Number of results
            sort_by: perf.rank_asc, perf.market_cap_desc, perf.circulating_supply_desc ...
        """
        params = {
            "type": "coin",
            "sort_by": sort_by,
            "per_page": limit,
            "merge": "latest,perf",
        }
        params.update(compact_params(symbol=symbol))
        return self.advanced(params)

    def get_top_by_market_cap(self, limit: int = DEFAULT_LIST_LIMIT):
        return self.get_coin_data(None, limit, "perf.market_cap_desc")

    def get_top_by_rank(self, limit: int = DEFAULT_LIST_LIMIT):
        return self.get_coin_data(None, limit, "perf.rank_asc")

    # Converter

    def convert(self, pair1: str, pair2: str, amount: float = 1):
        """Convert crypto to fiat or crypto to crypto (BTC -> USD, ETH -> BTC)."""
        return self._request("converter", pair1=pair1, pair2=pair2, amount=amount)

    # Base / cross currency

    def get_base_prices(self, symbol: str, exchange: str | None = None, fallback: bool = False):
        """Get prices of one base token (BTC, ETH, USD) against all others."""
        return self._request("base_latest", symbol=symbol, exchange=exchange, fallback=flag(fallback))

    def get_cross_rates(
        self,
        symbol: str,
        exchange: str | None = None,
        type: str = "crypto",
        period: str = DEFAULT_PERIOD,
        crossrates: bool = False,
        fallback: bool = False,
    ) -> dict[str, Any] | None:
        """Get cross rates with OHLC data for every pair of a base currency (USD, BTC, ETH)."""
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
        return self._request("ma_avg", symbol=symbol, period=period, exchange=exchange)

    def get_indicators(self, symbol: str, period: str = DEFAULT_PERIOD, exchange: str | None = None):
        return self._request("indicators", symbol=symbol, period=period, exchange=exchange)

    def get_pivot_points(self, symbol: str, period: str = DEFAULT_PERIOD, exchange: str | None = None):
        return self._request("pivot_points", symbol=symbol, period=period, exchange=exchange)

    def get_performance(self, symbol: str, exchange: str | None = None):
        return self._request("performance", symbol=symbol, exchange=exchange)

    # Top movers

    def get_top_gainers(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        type: str = "crypto",
    ):
        return self.get_sorted_data("active.chp", "desc", limit, type, exchange, period)

    def get_top_losers(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        type: str = "crypto",
    ):
        return self.get_sorted_data("active.chp", "asc", limit, type, exchange, period)

    def get_highest_volume(
        self,
        exchange: str | None = None,
        limit: int = DEFAULT_TOP_LIMIT,
        period: str = DEFAULT_PERIOD,
        type: str = "crypto",
    ):
        return self.get_sorted_data("active.v", "desc", limit, type, exchange, period)

    def get_sorted_data(
        self,
        sort_column: str,
        sort_direction: str = "desc",
        limit: int = DEFAULT_TOP_LIMIT,
        type: str | None = "crypto",
        exchange: str | None = None,
        period: str = DEFAULT_PERIOD,
    ) -> dict[str, Any] | None:
        """Get latest data sorted on any column.

        Args:
            sort_column: active.c, active.chp, active.v, active.h, active.l, rank, market_cap
            sort_direction: asc or desc
            limit: Number of results
            type: crypto, coin, futures, dex
            exchange: BINANCE, COINBASE
            period: Time period
        """
        return self._sorted_query(sort_column, sort_direction, limit, period, type=type, exchange=exchange)

    # Search

    def search(self, query: str, type: str | None = None):
        """Search coins/tokens (BTC, ethereum, doge)."""
        return self._request("list", search=query, type=type)
