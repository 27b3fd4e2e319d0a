#!/usr/bin/env python3
"""
FCS API Authentication Demo

Shows the three authentication methods:

1. access_key   - the secret key is sent with every request (default)
2. ip_whitelist - no key; the server address is whitelisted in the dashboard
3. token        - short-lived HMAC tokens, the secret never leaves the backend

Usage:
    FCS_API_ACCESS_KEY=... FCS_API_PUBLIC_KEY=... python examples/auth_example.py
    python examples/auth_example.py --method token --expiry 900
"""

import json
import os

import typer
from rich.console import Console

from fcsapi import FcsApi, FcsConfig

console = Console()


def show(api: FcsApi) -> None:
    api.forex.get_latest_price("FX:EURUSD")
    if api.is_success():
        console.print_json(json.dumps(api.get_response_data(), default=str))
    else:
        console.print(f"[red]Error:[/red] {api.get_error()}")


def main(
    method: str = typer.Option("all", help="access_key, ip_whitelist, token or all"),
    expiry: int = typer.Option(3600, help="Token lifetime in seconds (300, 900, 1800, 3600, 86400)"),
):
    access_key = os.getenv("FCS_API_ACCESS_KEY", "YOUR_API_KEY")
    public_key = os.getenv("FCS_API_PUBLIC_KEY", "YOUR_PUBLIC_KEY")

    if method in ("all", "access_key"):
        console.rule("Method 1: access key")
        with FcsApi(access_key) as api:
            show(api)

    if method in ("all", "ip_whitelist"):
        console.rule("Method 2: IP whitelist")
        # Whitelist the server IP first: https://fcsapi.com/dashboard/profile
        with FcsApi(FcsConfig.with_ip_whitelist()) as api:
            show(api)

    if method in ("all", "token"):
        console.rule("Method 3: token")
        config = FcsConfig.with_token(access_key, public_key, expiry)
        with FcsApi(config) as api:
            # Hand these parameters to frontend JavaScript
            console.print("Token for frontend:")
            console.print_json(json.dumps(api.generate_token()))
            show(api)

    console.rule("Config from environment")
    console.print("FCS_API_AUTH_METHOD, FCS_API_ACCESS_KEY, FCS_API_PUBLIC_KEY, FCS_API_TOKEN_EXPIRY")
    console.print(f"Effective: {FcsConfig.from_env()!r}")


if __name__ == "__main__":
    typer.run(main)
