"""Core client functionality: authentication, dispatch and endpoint modules."""

from fcsapi.core.auth import AuthMethod, FcsConfig, SignedToken
from fcsapi.core.fcs_api import FcsApi
from fcsapi.core.response import ApiResponse

__all__ = ["ApiResponse", "AuthMethod", "FcsApi", "FcsConfig", "SignedToken"]
