#!/usr/bin/env python3
"""
FCS API Stock Demo

Latest quote, financials and sector listing for one equity.

Usage:
    FCS_API_ACCESS_KEY=... python examples/stock_example.py --symbol NASDAQ:AAPL
"""

import json

import typer
from rich.console import Console

from fcsapi import FcsApi

console = Console()


def main(
    symbol: str = typer.Option("NASDAQ:AAPL", help="Stock symbol with exchange prefix"),
    sector: str = typer.Option("technology", help="Sector for the listing"),
):
    with FcsApi() as api:
        calls = {
            "Latest": lambda: api.stock.get_latest_price(symbol, get_profile=True),
            "Earnings": lambda: api.stock.get_earnings(symbol),
            "Dividends": lambda: api.stock.get_dividends(symbol),
            "Forecast": lambda: api.stock.get_forecast(symbol),
            f"Sector: {sector}": lambda: api.stock.get_by_sector(sector, limit=10),
        }
        for title, call in calls.items():
            console.rule(title)
            call()
            if api.is_success():
                console.print_json(json.dumps(api.get_response_data(), default=str))
            else:
                console.print(f"[red]Error:[/red] {api.get_error()}")


if __name__ == "__main__":
    typer.run(main)
