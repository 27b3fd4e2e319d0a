#!/usr/bin/env python3
"""Unit tests for the Stock endpoint module."""

from unittest.mock import MagicMock

import pytest

from fcsapi.core.providers.stock import FcsStock


@pytest.fixture
def stock():
    return FcsStock(MagicMock())


def _call(module):
    return module._api.request.call_args.args


class TestStockEndpoints:
    """Tests for endpoint and parameter mapping."""

    def test_symbols_list(self, stock):
        stock.get_symbols_list(exchange="NASDAQ", sector="technology")
        assert _call(stock) == ("stock/list", {"exchange": "NASDAQ", "sector": "technology"})

    def test_indices(self, stock):
        stock.get_indices_list(country="united-states")
        assert _call(stock) == ("stock/indices", {"country": "united-states"})
        stock.get_indices_latest("NASDAQ:NDX")
        assert _call(stock) == ("stock/indices_latest", {"symbol": "NASDAQ:NDX"})

    def test_latest_price_always_sends_profile_flag(self, stock):
        stock.get_latest_price("NASDAQ:AAPL")
        assert _call(stock) == ("stock/latest", {"symbol": "NASDAQ:AAPL", "period": "1D", "get_profile": 0})
        stock.get_latest_price("AAPL", get_profile=True)
        assert _call(stock)[1]["get_profile"] == 1

    def test_latest_by_country_and_indices(self, stock):
        stock.get_latest_by_country("japan", sector="finance")
        assert _call(stock) == ("stock/latest", {"country": "japan", "period": "1D", "sector": "finance"})
        stock.get_latest_by_indices("NASDAQ:NDX")
        assert _call(stock) == ("stock/latest", {"indices": "NASDAQ:NDX", "period": "1D"})

    @pytest.mark.parametrize(
        "method,endpoint,extra",
        [
            ("get_earnings", "stock/earnings", {"duration": "both"}),
            ("get_revenue", "stock/revenue", {}),
            ("get_dividends", "stock/dividend", {"format": "plain"}),
            ("get_balance_sheet", "stock/balance_sheet", {"duration": "annual", "format": "plain"}),
            ("get_income_statements", "stock/income_statements", {"duration": "annual", "format": "plain"}),
            ("get_cash_flow", "stock/cash_flow", {"duration": "annual", "format": "plain"}),
            ("get_statistics", "stock/statistics", {"duration": "annual"}),
            ("get_forecast", "stock/forecast", {}),
        ],
    )
    def test_financials(self, stock, method, endpoint, extra):
        getattr(stock, method)("NASDAQ:AAPL")
        assert _call(stock) == (endpoint, {"symbol": "NASDAQ:AAPL", **extra})

    def test_stock_data(self, stock):
        stock.get_stock_data("AAPL", data_column="profile,forecast", duration="interim")
        assert _call(stock) == (
            "stock/stock_data",
            {"symbol": "AAPL", "data_column": "profile,forecast", "duration": "interim", "format": "plain"},
        )

    def test_top_gainers_with_country(self, stock):
        stock.get_top_gainers(exchange="NYSE", limit=5, country="united-states")
        assert _call(stock) == (
            "stock/advance",
            {
                "period": "1D",
                "sort_by": "active.chp_desc",
                "per_page": 5,
                "merge": "latest",
                "exchange": "NYSE",
                "country": "united-states",
            },
        )

    def test_most_active(self, stock):
        stock.get_most_active()
        assert _call(stock)[1]["sort_by"] == "active.v_desc"

    def test_by_sector(self, stock):
        stock.get_by_sector("technology", limit=50, exchange="NASDAQ")
        assert _call(stock) == (
            "stock/advance",
            {"sector": "technology", "per_page": 50, "merge": "latest", "exchange": "NASDAQ"},
        )

    def test_by_country(self, stock):
        stock.get_by_country("india")
        assert _call(stock) == ("stock/advance", {"country": "india", "per_page": 100, "merge": "latest"})

    def test_search(self, stock):
        stock.search("apple", exchange="NASDAQ")
        assert _call(stock) == ("stock/list", {"search": "apple", "exchange": "NASDAQ"})

    def test_technical_without_exchange(self, stock):
        stock.get_pivot_points("AAPL", period="1W")
        assert _call(stock) == ("stock/pivot_points", {"symbol": "AAPL", "period": "1W"})
