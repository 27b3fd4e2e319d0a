#!/usr/bin/env python3
"""Credentials and request authentication for the FCS API.

Three mutually exclusive authentication methods are supported:

- ``access_key``: the secret key travels with every request.
- ``ip_whitelist``: nothing is added; the server checks the caller's address
  against the whitelist configured in the account dashboard.
- ``token``: a short-lived HMAC-SHA256 token is computed from the secret and
  the public key, so the secret itself never leaves the backend. The token
  parameters can also be handed to an untrusted frontend.

Token signature::

    expiry  = now_unix_seconds + token_expiry_seconds
    message = public_key + str(expiry)
    _token  = hex(HMAC-SHA256(key=access_key, msg=message))
"""

import hashlib
import hmac
import os
from enum import Enum
from typing import Any

import attrs
import pendulum

from fcsapi.utils.config import (
    ALLOWED_TOKEN_EXPIRY_SECONDS,
    DEFAULT_AUTH_METHOD,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_EXPIRY_SECONDS,
    ENV_ACCESS_KEY,
    ENV_AUTH_METHOD,
    ENV_CONNECT_TIMEOUT,
    ENV_PUBLIC_KEY,
    ENV_TIMEOUT,
    ENV_TOKEN_EXPIRY,
    _parse_float_env,
    _parse_int_env,
)
from fcsapi.utils.for_core.rest_exceptions import ConfigurationError
from fcsapi.utils.loguru_setup import logger

__all__ = [
    "AuthMethod",
    "FcsConfig",
    "SignedToken",
    "compute_signature",
]


class AuthMethod(Enum):
    """Authentication methods accepted by the API."""

    ACCESS_KEY = "access_key"
    IP_WHITELIST = "ip_whitelist"
    TOKEN = "token"

    @classmethod
    def from_string(cls, method: "str | AuthMethod") -> "AuthMethod":
        """Convert a string such as ``"token"`` or ``"IP_WHITELIST"`` to an AuthMethod.

        Raises:
            ValueError: If the string doesn't match any known method
        """
        if isinstance(method, AuthMethod):
            return method
        normalized = str(method).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        supported = [m.value for m in cls]
        raise ValueError(f"Unknown auth method: {method!r}. Supported methods: {supported}")


def compute_signature(message: str, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``message`` keyed by ``secret``."""
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def _current_unix_time() -> int:
    return pendulum.now("UTC").int_timestamp


def _warn_unlisted_expiry(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value not in ALLOWED_TOKEN_EXPIRY_SECONDS:
        logger.warning(
            f"{attribute.name}={value} is not one of the documented lifetimes "
            f"{sorted(ALLOWED_TOKEN_EXPIRY_SECONDS)}; the server may reject the token"
        )


@attrs.frozen
class SignedToken:
    """A time-boxed token derived from the secret and public keys.

    Attributes:
        token: Lowercase hex HMAC-SHA256 signature
        expiry: Unix timestamp (seconds) after which the token is invalid
        public_key: Public key the token was signed for
    """

    token: str
    expiry: int
    public_key: str

    def as_params(self) -> dict[str, Any]:
        """Request parameters carrying this token."""
        return {
            "_token": self.token,
            "_expiry": self.expiry,
            "_public_key": self.public_key,
        }


@attrs.define
class FcsConfig:
    """Client credentials, authentication method and network timeouts.

    Build one with the named constructors rather than setting fields by hand:

        >>> config = FcsConfig.with_token("SECRET", "PUB", token_expiry_seconds=900)
        >>> config.get_auth_params().keys()
        dict_keys(['_token', '_expiry', '_public_key'])
    """

    auth_method: AuthMethod = attrs.field(
        default=AuthMethod.from_string(DEFAULT_AUTH_METHOD),
        converter=AuthMethod.from_string,
    )
    access_key: str = attrs.field(default="", repr=False)
    public_key: str = ""
    token_expiry_seconds: int = attrs.field(
        default=DEFAULT_TOKEN_EXPIRY_SECONDS,
        converter=int,
        validator=_warn_unlisted_expiry,
    )
    timeout_seconds: float = attrs.field(default=DEFAULT_TIMEOUT_SECONDS, converter=float)
    connect_timeout_seconds: float = attrs.field(default=DEFAULT_CONNECT_TIMEOUT_SECONDS, converter=float)

    @classmethod
    def with_access_key(cls, access_key: str) -> "FcsConfig":
        """Config that sends the secret key with every request."""
        return cls(auth_method=AuthMethod.ACCESS_KEY, access_key=access_key)

    @classmethod
    def with_ip_whitelist(cls) -> "FcsConfig":
        """Config for a whitelisted server address (no key needed)."""
        return cls(auth_method=AuthMethod.IP_WHITELIST)

    @classmethod
    def with_token(
        cls,
        access_key: str,
        public_key: str,
        token_expiry_seconds: int = DEFAULT_TOKEN_EXPIRY_SECONDS,
    ) -> "FcsConfig":
        """Config that signs every request with a fresh token.

        Args:
            access_key: Private API key (kept on the server)
            public_key: Public key (safe to expose)
            token_expiry_seconds: Token validity in seconds
        """
        return cls(
            auth_method=AuthMethod.TOKEN,
            access_key=access_key,
            public_key=public_key,
            token_expiry_seconds=token_expiry_seconds,
        )

    @classmethod
    def from_env(cls) -> "FcsConfig":
        """Build a config from ``FCS_API_*`` environment variables.

        Environment variables:
            FCS_API_AUTH_METHOD: access_key, ip_whitelist or token (default access_key)
            FCS_API_ACCESS_KEY: Secret key
            FCS_API_PUBLIC_KEY: Public key for token mode
            FCS_API_TOKEN_EXPIRY: Token lifetime in seconds (default 3600)
            FCS_API_TIMEOUT: Request timeout in seconds (default 30)
            FCS_API_CONNECT_TIMEOUT: Connect timeout in seconds (default 5)
        """
        return cls(
            auth_method=os.getenv(ENV_AUTH_METHOD) or DEFAULT_AUTH_METHOD,
            access_key=os.getenv(ENV_ACCESS_KEY, ""),
            public_key=os.getenv(ENV_PUBLIC_KEY, ""),
            token_expiry_seconds=_parse_int_env(ENV_TOKEN_EXPIRY, DEFAULT_TOKEN_EXPIRY_SECONDS),
            timeout_seconds=_parse_float_env(ENV_TIMEOUT, DEFAULT_TIMEOUT_SECONDS),
            connect_timeout_seconds=_parse_float_env(ENV_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT_SECONDS),
        )

    def _require_access_key(self) -> str:
        if not self.access_key:
            raise ConfigurationError(
                f"auth_method={self.auth_method.value} requires an access key; "
                f"set access_key or {ENV_ACCESS_KEY}"
            )
        return self.access_key

    def sign(self, now: int | None = None) -> SignedToken:
        """Compute a signed token valid for ``token_expiry_seconds`` from ``now``.

        Args:
            now: Unix time in seconds; defaults to the current UTC time

        Raises:
            ConfigurationError: If the access key is empty
        """
        secret = self._require_access_key()
        if not self.public_key:
            logger.warning("Generating a token with an empty public key")

        issued_at = _current_unix_time() if now is None else int(now)
        expiry = issued_at + self.token_expiry_seconds
        token = compute_signature(f"{self.public_key}{expiry}", secret)
        return SignedToken(token=token, expiry=expiry, public_key=self.public_key)

    def generate_token(self, now: int | None = None) -> dict[str, Any]:
        """Token parameters ``{_token, _expiry, _public_key}`` for frontend use.

        Works regardless of ``auth_method`` so a backend configured with
        access_key auth can still mint tokens.
        """
        return self.sign(now).as_params()

    def get_auth_params(self) -> dict[str, Any]:
        """Parameters to attach to every outgoing request for the configured method."""
        if self.auth_method is AuthMethod.IP_WHITELIST:
            return {}
        if self.auth_method is AuthMethod.TOKEN:
            return self.generate_token()
        return {"access_key": self._require_access_key()}
