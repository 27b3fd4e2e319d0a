#!/usr/bin/env python3
"""Typed view over an API response mapping.

Every API reply is a JSON object with ``status``, ``code``, ``msg`` and
``response`` fields. ``ApiResponse`` wraps one such mapping, including the
synthetic failure built when a request never produced a usable reply.
"""

from typing import Any

import attrs

from fcsapi.utils.config import REQUEST_ERROR_PREFIX, UNKNOWN_ERROR_MESSAGE

__all__ = ["ApiResponse", "error_message", "is_success_payload", "request_error_payload"]


def request_error_payload(detail: str) -> dict[str, Any]:
    """Synthetic response stored when a request fails before a reply is parsed."""
    return {
        "status": False,
        "code": 0,
        "msg": f"{REQUEST_ERROR_PREFIX}{detail}",
        "response": None,
    }


def is_success_payload(payload: dict[str, Any]) -> bool:
    """True only when ``status`` is the boolean ``True``."""
    return payload.get("status") is True


def error_message(payload: dict[str, Any]) -> str | None:
    """``None`` for a successful payload, otherwise its ``msg`` or a generic message."""
    if is_success_payload(payload):
        return None
    msg = payload.get("msg")
    if msg is None:
        return UNKNOWN_ERROR_MESSAGE
    return str(msg)


@attrs.frozen
class ApiResponse:
    """Result of one API call: either a server reply or a request failure.

    Attributes:
        payload: The parsed response mapping (or the synthetic failure mapping)
        request_failed: True when no reply was parsed (network, timeout, bad body)
    """

    payload: dict[str, Any] = attrs.field(factory=dict)
    request_failed: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ApiResponse":
        return cls(payload=payload)

    @classmethod
    def request_error(cls, detail: str) -> "ApiResponse":
        return cls(payload=request_error_payload(detail), request_failed=True)

    @property
    def is_success(self) -> bool:
        return is_success_payload(self.payload)

    @property
    def status(self) -> Any:
        """The raw ``status`` field, or None if absent."""
        return self.payload.get("status")

    @property
    def code(self) -> Any:
        return self.payload.get("code")

    @property
    def msg(self) -> str | None:
        msg = self.payload.get("msg")
        return None if msg is None else str(msg)

    @property
    def error(self) -> str | None:
        return error_message(self.payload)

    @property
    def data(self) -> Any:
        """The ``response`` field verbatim, or None if absent."""
        return self.payload.get("response")

    def as_dict(self) -> dict[str, Any] | None:
        """The mapping ``FcsApi.request`` would have returned (None on request failure)."""
        return None if self.request_failed else self.payload
