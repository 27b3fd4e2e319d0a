#!/usr/bin/env python3
"""FCS API REST client.

``FcsApi`` executes one POST per call against ``https://api-v4.fcsapi.com/``.
Authentication parameters from the config are applied over the caller's
parameters, so a caller can never replace the configured credentials.

Request failures (network errors, timeouts, bodies that are not a JSON
object) do not raise. They are recorded as a synthetic response::

    {"status": False, "code": 0, "msg": "Request Error: <details>", "response": None}

and ``request`` returns ``None``. Server replies with ``status: false`` are
returned unchanged. Use ``is_success()`` / ``get_error()`` to tell them apart,
or ``request_result()`` to get an ``ApiResponse`` in every case.

The last response is kept per instance. Under concurrent use of one instance
the accessors reflect whichever call finished last; rely on the value each
call returns instead.
"""

from typing import Any

import httpx

from fcsapi.core.auth import FcsConfig
from fcsapi.core.providers.crypto import FcsCrypto
from fcsapi.core.providers.forex import FcsForex
from fcsapi.core.providers.stock import FcsStock
from fcsapi.core.response import ApiResponse, error_message, is_success_payload
from fcsapi.utils.config import BASE_URL
from fcsapi.utils.for_core.rest_exceptions import (
    HTTPError,
    JSONDecodeError,
    NetworkError,
    RestAPIError,
    RestTimeoutError,
)
from fcsapi.utils.loguru_setup import logger
from fcsapi.utils.network.client_factory import (
    build_timeout,
    create_async_client,
    create_client,
    safely_close_client,
)

__all__ = ["FcsApi", "encode_form"]

ParamValue = str | int | float | bool | None


def encode_form(params: dict[str, ParamValue]) -> dict[str, str]:
    """Convert request parameters to form fields.

    ``None`` values are dropped, booleans become ``"1"``/``"0"`` and every
    other value is sent as ``str(value)``.
    """
    form: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "1" if value else "0"
        else:
            form[key] = str(value)
    return form


def _transport_error(exc: Exception) -> RestAPIError:
    if isinstance(exc, httpx.TimeoutException):
        return RestTimeoutError(f"Timeout: {exc}")
    if isinstance(exc, UnicodeEncodeError):
        return RestAPIError(f"Could not encode request parameters: {exc}")
    return NetworkError(str(exc) or type(exc).__name__)


def _parse_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a reply body into a mapping.

    Raises:
        HTTPError: If an error status came back without a JSON body
        JSONDecodeError: If the body is not a JSON object
    """
    try:
        payload = response.json()
    except ValueError as e:
        if response.is_error:
            raise HTTPError(response.status_code, f"HTTP {response.status_code} {response.reason_phrase}") from e
        raise JSONDecodeError(f"Invalid JSON response: {e}") from e

    if not isinstance(payload, dict):
        raise JSONDecodeError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


class FcsApi:
    """Client for Forex, Crypto and Stock market data.

    Args:
        config: An ``FcsConfig``, an access key string, or None to read the
            ``FCS_API_*`` environment variables
        client: Optional pre-configured ``httpx.Client``
        async_client: Optional pre-configured ``httpx.AsyncClient``
        base_url: API host, overridable for testing

    Example:
        >>> api = FcsApi("YOUR_ACCESS_KEY")
        >>> data = api.forex.get_latest_price("FX:EURUSD")
        >>> if not api.is_success():
        ...     print(api.get_error())
    """

    def __init__(
        self,
        config: FcsConfig | str | None = None,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        if isinstance(config, str):
            config = FcsConfig.with_access_key(config)
        elif config is None:
            config = FcsConfig.from_env()

        self.config = config
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._client = client
        self._async_client = async_client
        self.last_response: dict[str, Any] = {}

        self.forex = FcsForex(self)
        self.crypto = FcsCrypto(self)
        self.stock = FcsStock(self)

        logger.debug(f"Initialized FcsApi with auth_method={config.auth_method.value}")

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def get_config(self) -> FcsConfig:
        return self.config

    def set_timeout(self, seconds: float) -> "FcsApi":
        """Set the request timeout, applying it to any live HTTP clients.

        Returns:
            Self for method chaining
        """
        self.config.timeout_seconds = seconds
        timeout = build_timeout(self.config.timeout_seconds, self.config.connect_timeout_seconds)
        if self._client is not None:
            self._client.timeout = timeout
        if self._async_client is not None:
            self._async_client.timeout = timeout
        return self

    def generate_token(self, now: int | None = None) -> dict[str, Any]:
        """Token parameters ``{_token, _expiry, _public_key}`` to hand to a frontend."""
        return self.config.generate_token(now)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = create_client(
                timeout=self.config.timeout_seconds,
                connect_timeout=self.config.connect_timeout_seconds,
            )
        return self._client

    def _ensure_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = create_async_client(
                timeout=self.config.timeout_seconds,
                connect_timeout=self.config.connect_timeout_seconds,
            )
        return self._async_client

    def _prepare(self, endpoint: str, params: dict[str, ParamValue] | None) -> tuple[str, dict[str, str]]:
        merged: dict[str, ParamValue] = dict(params or {})
        # Auth parameters go last so callers cannot override them
        merged.update(self.config.get_auth_params())
        form = encode_form(merged)
        url = self.base_url + endpoint.lstrip("/")
        logger.debug(f"POST {endpoint} fields={sorted(form)}")
        return url, form

    def _finish(self, endpoint: str, result: ApiResponse) -> ApiResponse:
        self.last_response = result.payload
        if result.request_failed:
            logger.warning(f"Request to {endpoint} failed: {result.msg}")
        elif not result.is_success:
            logger.debug(f"{endpoint} returned an error: {result.error}")
        return result

    def request_result(self, endpoint: str, params: dict[str, ParamValue] | None = None) -> ApiResponse:
        """Execute one API call and return its outcome as an ``ApiResponse``.

        Args:
            endpoint: Path relative to the API host, e.g. ``"forex/latest"``
            params: Request parameters; ``None`` values are omitted

        Raises:
            ConfigurationError: If the configured auth method lacks its access key
        """
        url, form = self._prepare(endpoint, params)
        try:
            try:
                response = self._ensure_client().post(url, data=form)
            except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
                raise _transport_error(e) from e
            result = ApiResponse.from_payload(_parse_body(response))
        except RestAPIError as e:
            result = ApiResponse.request_error(e.message)
        return self._finish(endpoint, result)

    async def request_result_async(
        self, endpoint: str, params: dict[str, ParamValue] | None = None
    ) -> ApiResponse:
        """Awaitable counterpart of :meth:`request_result`."""
        url, form = self._prepare(endpoint, params)
        try:
            try:
                response = await self._ensure_async_client().post(url, data=form)
            except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
                raise _transport_error(e) from e
            result = ApiResponse.from_payload(_parse_body(response))
        except RestAPIError as e:
            result = ApiResponse.request_error(e.message)
        return self._finish(endpoint, result)

    def request(self, endpoint: str, params: dict[str, ParamValue] | None = None) -> dict[str, Any] | None:
        """Execute one API call.

        Returns:
            The parsed response mapping, or None if the request itself failed
        """
        return self.request_result(endpoint, params).as_dict()

    async def request_async(
        self, endpoint: str, params: dict[str, ParamValue] | None = None
    ) -> dict[str, Any] | None:
        """Awaitable counterpart of :meth:`request`."""
        result = await self.request_result_async(endpoint, params)
        return result.as_dict()

    # ------------------------------------------------------------------
    # Last response accessors
    # ------------------------------------------------------------------

    def get_last_response(self) -> dict[str, Any]:
        return self.last_response

    def get_response_data(self) -> Any:
        """The ``response`` field of the last response, or None if absent."""
        return self.last_response.get("response")

    def is_success(self) -> bool:
        """True if the last response has ``status`` set to boolean true."""
        return is_success_payload(self.last_response)

    def get_error(self) -> str | None:
        """Error message of the last response, or None if it succeeded."""
        return error_message(self.last_response)

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the synchronous HTTP client."""
        safely_close_client(self._client)
        self._client = None

    async def aclose(self) -> None:
        """Close both HTTP clients."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
        self.close()

    def __enter__(self) -> "FcsApi":
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "FcsApi":
        return self

    async def __aexit__(self, _exc_type, _exc_val, _exc_tb) -> None:
        await self.aclose()
