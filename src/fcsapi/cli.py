#!/usr/bin/env python3
"""Command-line access to the FCS API.

Credentials come from the ``FCS_API_*`` environment variables unless given
as options.

Example usage:
    # Mint a token for a frontend (token auth)
    fcsapi token --access-key SECRET --public-key PUB --expiry 900

    # Latest price through the configured auth method
    fcsapi latest forex EURUSD
    fcsapi latest crypto BINANCE:BTCUSDT --period 1h
"""

import json
from enum import Enum

import typer
from rich.console import Console
from rich.table import Table

from fcsapi.core.auth import AuthMethod, FcsConfig
from fcsapi.core.fcs_api import FcsApi
from fcsapi.utils.config import DEFAULT_PERIOD, DEFAULT_TOKEN_EXPIRY_SECONDS
from fcsapi.utils.for_core.rest_exceptions import ConfigurationError
from fcsapi.utils.loguru_setup import configure_level, suppress_http_logging

app = typer.Typer(help="FCS API client for forex, crypto and stock market data.", no_args_is_help=True)
console = Console()


class Market(str, Enum):
    forex = "forex"
    crypto = "crypto"
    stock = "stock"


def _load_config(access_key: str | None, public_key: str | None, auth_method: str | None) -> FcsConfig:
    config = FcsConfig.from_env()
    if auth_method:
        config.auth_method = AuthMethod.from_string(auth_method)
    if access_key:
        config.access_key = access_key
    if public_key:
        config.public_key = public_key
    return config


@app.command()
def token(
    access_key: str = typer.Option(None, "--access-key", "-k", help="Secret key (default: FCS_API_ACCESS_KEY)"),
    public_key: str = typer.Option(None, "--public-key", "-p", help="Public key (default: FCS_API_PUBLIC_KEY)"),
    expiry: int = typer.Option(
        None,
        "--expiry",
        "-e",
        help=f"Token lifetime in seconds (default: FCS_API_TOKEN_EXPIRY or {DEFAULT_TOKEN_EXPIRY_SECONDS})",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the token parameters as JSON"),
):
    """Generate token parameters to hand to a frontend."""
    config = _load_config(access_key, public_key, None)
    if expiry is not None:
        config.token_expiry_seconds = expiry
    try:
        params = config.generate_token()
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {e.message}")
        raise typer.Exit(code=2) from e

    if as_json:
        console.print_json(json.dumps(params))
        return

    table = Table(title="FCS API token")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")
    for key, value in params.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def latest(
    market: Market = typer.Argument(..., help="forex, crypto or stock"),
    symbol: str = typer.Argument(..., help="Symbol(s), e.g. EURUSD or BINANCE:BTCUSDT"),
    period: str = typer.Option(DEFAULT_PERIOD, "--period", help="Time period: 1m,5m,15m,1h,1D ..."),
    auth_method: str = typer.Option(None, "--auth-method", help="access_key, ip_whitelist or token"),
    access_key: str = typer.Option(None, "--access-key", "-k", help="Secret key (default: FCS_API_ACCESS_KEY)"),
    public_key: str = typer.Option(None, "--public-key", "-p", help="Public key (default: FCS_API_PUBLIC_KEY)"),
    log_level: str = typer.Option("ERROR", "--log-level", "-l", help="DEBUG, INFO, WARNING, ERROR"),
):
    """Fetch the latest price for a symbol."""
    configure_level(log_level)
    suppress_http_logging(log_level.upper() != "DEBUG")
    config = _load_config(access_key, public_key, auth_method)

    with FcsApi(config) as api:
        module = getattr(api, market.value)
        try:
            module.get_latest_price(symbol, period=period)
        except ConfigurationError as e:
            console.print(f"[bold red]Error:[/bold red] {e.message}")
            raise typer.Exit(code=2) from e

        if not api.is_success():
            console.print(f"[bold red]Error:[/bold red] {api.get_error()}")
            raise typer.Exit(code=1)

        console.print_json(json.dumps(api.get_response_data(), default=str))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
