#!/usr/bin/env python3
"""Unit tests for the FcsApi request dispatcher.

Tests cover:
- Form encoding and auth parameter precedence
- Failure normalization (network, timeout, bad bodies)
- Last-response accessors
- Client configuration and lifecycle
"""

import httpx
import pytest

from fcsapi.core.auth import AuthMethod, FcsConfig
from fcsapi.core.fcs_api import FcsApi, encode_form
from fcsapi.core.providers import FcsCrypto, FcsForex, FcsStock
from fcsapi.core.response import ApiResponse
from fcsapi.utils.for_core.rest_exceptions import ConfigurationError

T = 1_700_000_000


class TestEncodeForm:
    """Tests for parameter to form-field conversion."""

    def test_none_values_dropped(self):
        assert encode_form({"symbol": "EURUSD", "exchange": None}) == {"symbol": "EURUSD"}

    def test_booleans_become_flags(self):
        assert encode_form({"a": True, "b": False}) == {"a": "1", "b": "0"}

    def test_numbers_stringified(self):
        assert encode_form({"length": 300, "amount": 2.5}) == {"length": "300", "amount": "2.5"}

    def test_empty_string_kept(self):
        assert encode_form({"search": ""}) == {"search": ""}


class TestDispatch:
    """Tests for request construction."""

    def test_posts_form_to_endpoint(self, make_api):
        api, handler = make_api()

        result = api.request("forex/latest", {"symbol": "EURUSD", "exchange": None})

        assert result["status"] is True
        request = handler.last_request
        assert request.method == "POST"
        assert str(request.url) == "https://api-v4.fcsapi.com/forex/latest"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert handler.last_form == {"symbol": "EURUSD", "access_key": "SECRET"}

    def test_leading_slash_tolerated(self, make_api):
        api, handler = make_api()
        api.request("/crypto/list")
        assert handler.last_path == "/crypto/list"

    def test_auth_params_override_caller(self, make_api):
        """A caller-supplied access_key never replaces the configured one."""
        api, handler = make_api()

        api.request("forex/latest", {"symbol": "EURUSD", "access_key": "attacker"})

        assert handler.last_form["access_key"] == "SECRET"

    def test_token_params_override_caller(self, make_api, fixed_clock):
        fixed_clock(T)
        api, handler = make_api(FcsConfig.with_token("SECRET", "PUB", 3600))

        api.request("forex/latest", {"_expiry": 1, "_public_key": "other"})

        form = handler.last_form
        assert form["_expiry"] == str(T + 3600)
        assert form["_public_key"] == "PUB"
        assert form["_token"] == api.generate_token(now=T)["_token"]
        assert "access_key" not in form

    def test_ip_whitelist_sends_caller_params_only(self, make_api):
        api, handler = make_api(FcsConfig.with_ip_whitelist())
        api.request("stock/latest", {"symbol": "AAPL"})
        assert handler.last_form == {"symbol": "AAPL"}

    def test_boolean_params_encoded(self, make_api):
        api, handler = make_api()
        api.request("forex/latest", {"get_profile": True, "fallback": False})
        assert handler.last_form["get_profile"] == "1"
        assert handler.last_form["fallback"] == "0"

    def test_missing_access_key_raises(self, make_api):
        api, handler = make_api(FcsConfig.with_access_key(""))

        with pytest.raises(ConfigurationError):
            api.request("forex/latest", {"symbol": "EURUSD"})

        assert handler.requests == []

    def test_custom_base_url(self):
        handler_calls = []

        def handler(request):
            handler_calls.append(request)
            return httpx.Response(200, json={"status": True, "response": []})

        api = FcsApi("KEY", client=httpx.Client(transport=httpx.MockTransport(handler)), base_url="http://local")
        api.request("forex/list")
        assert str(handler_calls[0].url) == "http://local/forex/list"


class TestResponses:
    """Tests for success, API error and request failure handling."""

    def test_success(self, make_api):
        payload = {"status": True, "code": 200, "msg": "ok", "response": [{"s": "EURUSD"}]}
        api, _ = make_api(payload=payload)

        assert api.request("forex/latest") == payload
        assert api.is_success() is True
        assert api.get_error() is None
        assert api.get_response_data() == [{"s": "EURUSD"}]
        assert api.get_last_response() == payload

    def test_api_error_returned_unchanged(self, make_api):
        payload = {"status": False, "code": 101, "msg": "Invalid access key", "response": None}
        api, _ = make_api(payload=payload)

        assert api.request("forex/latest") == payload
        assert api.is_success() is False
        assert api.get_error() == "Invalid access key"

    def test_api_error_with_http_status_passes_through(self, make_api):
        payload = {"status": False, "code": 403, "msg": "Forbidden"}
        api, _ = make_api(payload=payload, status_code=403)

        assert api.request("forex/latest") == payload
        assert api.get_error() == "Forbidden"

    def test_truthy_non_boolean_status_is_not_success(self, make_api):
        api, _ = make_api(payload={"status": "true", "msg": "odd"})
        api.request("forex/latest")
        assert api.is_success() is False

    def test_missing_msg_gives_unknown_error(self, make_api):
        api, _ = make_api(payload={"status": False})
        api.request("forex/latest")
        assert api.get_error() == "Unknown error"

    def test_connection_error(self, make_api):
        api, _ = make_api(exc=httpx.ConnectError)

        assert api.request("forex/latest", {"symbol": "EURUSD"}) is None

        assert api.is_success() is False
        assert api.get_error().startswith("Request Error: ")
        assert "Connection refused" in api.get_error()
        assert api.get_response_data() is None
        assert api.get_last_response()["code"] == 0

    def test_timeout(self, make_api):
        api, _ = make_api(exc=httpx.ReadTimeout, exc_message="timed out")

        assert api.request("forex/latest") is None
        assert api.get_error() == "Request Error: Timeout: timed out"

    def test_non_json_body(self, make_api):
        api, _ = make_api(content=b"<html>maintenance</html>")

        assert api.request("forex/latest") is None
        assert api.get_error().startswith("Request Error: Invalid JSON response")

    def test_non_json_error_status(self, make_api):
        api, _ = make_api(content=b"Bad Gateway", status_code=502)

        assert api.request("forex/latest") is None
        assert api.get_error() == "Request Error: HTTP 502 Bad Gateway"

    def test_unencodable_param_normalized(self, make_api):
        """A lone surrogate cannot be form-encoded; the call still returns None."""
        api, handler = make_api()

        assert api.request("forex/latest", {"symbol": "EUR\ud800"}) is None

        assert handler.requests == []
        assert api.is_success() is False
        assert api.get_error().startswith("Request Error: Could not encode request parameters")
        assert api.get_last_response()["code"] == 0

    @pytest.mark.asyncio
    async def test_unencodable_param_normalized_async(self, make_api):
        api, _ = make_api()

        result = await api.request_result_async("forex/latest", {"symbol": "EUR\ud800"})

        assert result.request_failed
        assert result.msg.startswith("Request Error: Could not encode request parameters")

    def test_non_object_json(self, make_api):
        api, _ = make_api(payload=[1, 2, 3])

        assert api.request("forex/latest") is None
        assert api.get_error() == "Request Error: Expected a JSON object, got list"

    def test_failure_then_success_resets_state(self, make_api):
        api, handler = make_api(exc=httpx.ConnectError)
        api.request("forex/latest")
        assert not api.is_success()

        handler.exc = None
        api.request("forex/latest")
        assert api.is_success()
        assert api.get_error() is None

    def test_request_result(self, make_api):
        api, _ = make_api(exc=httpx.ConnectError)

        result = api.request_result("forex/latest")

        assert isinstance(result, ApiResponse)
        assert result.request_failed is True
        assert result.status is False
        assert result.code == 0
        assert result.data is None
        assert result.as_dict() is None


class TestAccessorsBeforeRequest:
    """Tests for accessor behavior on a fresh client."""

    def test_fresh_client_state(self):
        api = FcsApi("KEY")
        assert api.get_last_response() == {}
        assert api.is_success() is False
        assert api.get_error() == "Unknown error"
        assert api.get_response_data() is None


class TestConfiguration:
    """Tests for construction and configuration helpers."""

    def test_string_shorthand(self):
        api = FcsApi("MY_KEY")
        assert api.get_config().auth_method is AuthMethod.ACCESS_KEY
        assert api.get_config().access_key == "MY_KEY"

    def test_none_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FCS_API_AUTH_METHOD", "ip_whitelist")
        api = FcsApi()
        assert api.get_config().auth_method is AuthMethod.IP_WHITELIST

    def test_endpoint_modules(self):
        api = FcsApi("KEY")
        assert isinstance(api.forex, FcsForex)
        assert isinstance(api.crypto, FcsCrypto)
        assert isinstance(api.stock, FcsStock)

    def test_set_timeout_chains_and_updates_client(self, make_api):
        api, _ = make_api()

        assert api.set_timeout(12) is api

        assert api.get_config().timeout_seconds == 12.0
        assert api._client.timeout.read == 12.0
        assert api._client.timeout.connect == api.get_config().connect_timeout_seconds

    def test_lazy_client_uses_config_timeouts(self):
        config = FcsConfig.with_access_key("KEY")
        config.timeout_seconds = 7
        config.connect_timeout_seconds = 2
        api = FcsApi(config)

        client = api._ensure_client()

        assert client.timeout.read == 7.0
        assert client.timeout.connect == 2.0
        assert api._ensure_client() is client
        api.close()
        assert api._client is None

    def test_generate_token_delegates(self, fixed_clock):
        fixed_clock(T)
        api = FcsApi(FcsConfig.with_token("SECRET", "PUB", 900))
        assert api.generate_token() == api.get_config().generate_token()

    def test_context_manager_closes(self, make_api):
        api, _ = make_api()
        client = api._client
        with api as entered:
            assert entered is api
        assert client.is_closed
