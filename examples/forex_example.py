#!/usr/bin/env python3
"""
FCS API Forex Demo

Latest prices, conversion, history and top movers for currency pairs.

Usage:
    FCS_API_ACCESS_KEY=... python examples/forex_example.py
    FCS_API_ACCESS_KEY=... python examples/forex_example.py --symbol GBPUSD --period 1h
"""

import typer
from rich.console import Console
from rich.table import Table

from fcsapi import FcsApi, history_to_dataframe

console = Console()


def main(
    symbol: str = typer.Option("EURUSD", help="Currency pair"),
    period: str = typer.Option("1D", help="1m, 5m, 15m, 30m, 1h, 4h, 1D, 1W, 1M"),
    length: int = typer.Option(20, help="Number of candles"),
):
    with FcsApi() as api:
        latest = api.forex.get_latest_price(f"FX:{symbol}", period=period)
        if latest is None or not api.is_success():
            console.print(f"[red]Error:[/red] {api.get_error()}")
            raise typer.Exit(code=1)

        table = Table(title=f"Latest {symbol}")
        table.add_column("Ticker", style="cyan")
        table.add_column("Close", style="green")
        table.add_column("Change %")
        for row in api.get_response_data() or []:
            active = row.get("active", {})
            table.add_row(str(row.get("ticker")), str(active.get("c")), str(active.get("chp")))
        console.print(table)

        api.forex.convert(symbol[:3], symbol[3:], 100)
        console.print(f"100 {symbol[:3]} -> {symbol[3:]}: {api.get_response_data()}")

        history = api.forex.get_history(symbol, period=period, length=length)
        df = history_to_dataframe(history)
        console.print(df.tail(10).to_string())

        api.forex.get_top_gainers(limit=5)
        console.print("Top gainers:", api.get_response_data())


if __name__ == "__main__":
    typer.run(main)
