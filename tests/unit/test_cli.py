#!/usr/bin/env python3
"""Unit tests for the fcsapi command-line interface."""

import hashlib
import hmac
from urllib.parse import parse_qsl

import httpx
import pytest
from typer.testing import CliRunner

from fcsapi.cli import app
from fcsapi.core.fcs_api import FcsApi

T = 1_700_000_000

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FCS_API_AUTH_METHOD", "FCS_API_ACCESS_KEY", "FCS_API_PUBLIC_KEY", "FCS_API_TOKEN_EXPIRY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def served(monkeypatch):
    """Route the CLI's FcsApi through a mock transport; returns the recorded forms."""
    forms = []
    replies = {"payload": {"status": True, "code": 200, "msg": "ok", "response": [{"s": "EURUSD", "c": "1.0845"}]}}

    def handler(request: httpx.Request) -> httpx.Response:
        forms.append((request.url.path, dict(parse_qsl(request.content.decode()))))
        return httpx.Response(200, json=replies["payload"])

    def factory(config):
        return FcsApi(config, client=httpx.Client(transport=httpx.MockTransport(handler)))

    monkeypatch.setattr("fcsapi.cli.FcsApi", factory)
    return forms, replies


class TestTokenCommand:
    def test_json_output(self, fixed_clock):
        fixed_clock(T)
        expected = hmac.new(b"SECRET", f"PUB{T + 900}".encode(), hashlib.sha256).hexdigest()

        result = runner.invoke(app, ["token", "-k", "SECRET", "-p", "PUB", "-e", "900", "--json"])

        assert result.exit_code == 0
        assert expected in result.stdout
        assert str(T + 900) in result.stdout

    def test_reads_environment(self, monkeypatch, fixed_clock):
        fixed_clock(T)
        monkeypatch.setenv("FCS_API_ACCESS_KEY", "SECRET")
        monkeypatch.setenv("FCS_API_PUBLIC_KEY", "PUB")

        result = runner.invoke(app, ["token", "--json"])

        assert result.exit_code == 0
        assert str(T + 3600) in result.stdout

    def test_env_expiry_used_without_option(self, monkeypatch, fixed_clock):
        fixed_clock(T)
        monkeypatch.setenv("FCS_API_ACCESS_KEY", "SECRET")
        monkeypatch.setenv("FCS_API_PUBLIC_KEY", "PUB")
        monkeypatch.setenv("FCS_API_TOKEN_EXPIRY", "900")

        result = runner.invoke(app, ["token", "--json"])

        assert result.exit_code == 0
        assert str(T + 900) in result.stdout
        assert str(T + 3600) not in result.stdout

    def test_expiry_option_overrides_env(self, monkeypatch, fixed_clock):
        fixed_clock(T)
        monkeypatch.setenv("FCS_API_TOKEN_EXPIRY", "900")

        result = runner.invoke(app, ["token", "-k", "SECRET", "-p", "PUB", "-e", "1800", "--json"])

        assert result.exit_code == 0
        assert str(T + 1800) in result.stdout

    def test_missing_secret_exits_2(self):
        result = runner.invoke(app, ["token", "-p", "PUB"])
        assert result.exit_code == 2
        assert "requires an access key" in result.stdout


class TestLatestCommand:
    def test_prints_response_data(self, served):
        forms, _ = served

        result = runner.invoke(app, ["latest", "forex", "EURUSD", "-k", "KEY", "--period", "1h"])

        assert result.exit_code == 0
        assert "EURUSD" in result.stdout
        assert forms == [("/forex/latest", {"symbol": "EURUSD", "period": "1h", "access_key": "KEY"})]

    def test_stock_market(self, served):
        forms, _ = served
        result = runner.invoke(app, ["latest", "stock", "AAPL", "--auth-method", "ip_whitelist"])
        assert result.exit_code == 0
        assert forms[0] == ("/stock/latest", {"symbol": "AAPL", "period": "1D", "get_profile": "0"})

    def test_api_error_exits_1(self, served):
        _, replies = served
        replies["payload"] = {"status": False, "code": 101, "msg": "Invalid access key"}

        result = runner.invoke(app, ["latest", "crypto", "BTCUSDT", "-k", "BAD"])

        assert result.exit_code == 1
        assert "Invalid access key" in result.stdout

    def test_missing_key_exits_2(self, served):
        forms, _ = served
        result = runner.invoke(app, ["latest", "forex", "EURUSD"])
        assert result.exit_code == 2
        assert forms == []

    def test_unknown_market_rejected(self):
        result = runner.invoke(app, ["latest", "bonds", "X"])
        assert result.exit_code != 0
