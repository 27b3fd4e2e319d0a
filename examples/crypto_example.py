#!/usr/bin/env python3
"""
FCS API Crypto Demo

Uses the awaitable client to fetch several crypto endpoints concurrently.
Each call's return value is used directly; the ``get_*`` accessors only
reflect whichever call finished last.

Usage:
    FCS_API_ACCESS_KEY=... python examples/crypto_example.py
"""

import asyncio
import json

import typer
from rich.console import Console

from fcsapi import FcsApi

console = Console()


async def fetch(symbol: str, limit: int) -> None:
    async with FcsApi() as api:
        latest, coins, gainers = await asyncio.gather(
            api.request_result_async("crypto/latest", {"symbol": symbol}),
            api.request_result_async(
                "crypto/advance",
                {"type": "coin", "sort_by": "perf.market_cap_desc", "per_page": limit, "merge": "latest,perf"},
            ),
            api.request_result_async(
                "crypto/advance",
                {"type": "crypto", "sort_by": "active.chp_desc", "per_page": limit, "merge": "latest"},
            ),
        )

    for title, result in (("Latest", latest), ("Top by market cap", coins), ("Top gainers", gainers)):
        console.rule(title)
        if result.is_success:
            console.print_json(json.dumps(result.data, default=str))
        else:
            console.print(f"[red]Error:[/red] {result.error}")


def main(
    symbol: str = typer.Option("BINANCE:BTCUSDT", help="Crypto symbol"),
    limit: int = typer.Option(5, help="Rows per ranking"),
):
    asyncio.run(fetch(symbol, limit))


if __name__ == "__main__":
    typer.run(main)
