#!/usr/bin/env python
"""Root conftest.py providing fixtures for the test suite.

HTTP traffic is served by ``httpx.MockTransport`` so no test touches the
network. ``RecordingHandler`` answers every request with a canned reply (or
raises a canned transport error) and keeps what was sent for inspection.
"""

from urllib.parse import parse_qsl

import httpx
import pytest

from fcsapi.core.auth import FcsConfig
from fcsapi.core.fcs_api import FcsApi

SUCCESS_PAYLOAD = {
    "status": True,
    "code": 200,
    "msg": "Successfully",
    "response": [{"ticker": "FX:EURUSD", "active": {"c": 1.0845}}],
}


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark tests that call the live API")


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed outcome."""

    def __init__(self, payload=None, status_code=200, content=None, exc=None, exc_message="Connection refused"):
        self.payload = SUCCESS_PAYLOAD if payload is None and content is None else payload
        self.status_code = status_code
        self.content = content
        self.exc = exc
        self.exc_message = exc_message
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(self.exc_message, request=request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last_request.content.decode(), keep_blank_values=True))

    @property
    def last_path(self) -> str:
        return self.last_request.url.path


@pytest.fixture
def make_api():
    """Factory fixture returning ``(api, handler)`` wired to a mock transport.

    Usage:
        api, handler = make_api(FcsConfig.with_access_key("KEY"), payload={...})
    """
    created: list[FcsApi] = []

    def _make(config=None, **handler_kwargs):
        handler = RecordingHandler(**handler_kwargs)
        transport = httpx.MockTransport(handler)
        api = FcsApi(
            config or FcsConfig.with_access_key("SECRET"),
            client=httpx.Client(transport=transport),
            async_client=httpx.AsyncClient(transport=transport),
        )
        created.append(api)
        return api, handler

    yield _make

    for api in created:
        api.close()


@pytest.fixture
def fixed_clock(monkeypatch):
    """Freeze token generation time; returns a setter for the frozen unix time."""
    state = {"now": 1_700_000_000}

    def _set(now: int) -> None:
        state["now"] = now

    monkeypatch.setattr("fcsapi.core.auth._current_unix_time", lambda: state["now"])
    return _set
