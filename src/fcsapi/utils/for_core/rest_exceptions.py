#!/usr/bin/env python3
"""Custom exceptions for FCS API operations.

``ConfigurationError`` is raised to callers when the client cannot build an
authenticated request. The ``RestAPIError`` family classifies transport and
protocol failures inside the dispatcher, which converts them into the
synthetic failure response instead of raising.
"""

from fcsapi.utils.loguru_setup import logger


class FcsApiError(Exception):
    """Base exception for all FCS API client errors."""

    def __init__(self, message="FCS API error occurred") -> None:
        """Initialize FcsApiError with an error message.

        Args:
            message: Error description.
        """
        self.message = message
        super().__init__(self.message)


class ConfigurationError(FcsApiError):
    """Exception raised when credentials are missing for the configured auth method."""

    def __init__(self, message="Invalid FCS API configuration") -> None:
        """Initialize ConfigurationError with an error message.

        Args:
            message: Error description.
        """
        super().__init__(message)
        logger.error(f"ConfigurationError: {message}")


class RestAPIError(FcsApiError):
    """Base exception for request failures normalized by the dispatcher."""

    def __init__(self, message="REST API error occurred") -> None:
        """Initialize RestAPIError with an error message.

        Args:
            message: Error description.
        """
        super().__init__(message)
        logger.debug(f"{type(self).__name__}: {message}")


class HTTPError(RestAPIError):
    """Exception raised when the server answers with a non-JSON error status."""

    def __init__(self, status_code, message=None) -> None:
        """Initialize HTTPError with status code.

        Args:
            status_code: HTTP status code.
            message: Error description.
        """
        self.status_code = status_code
        message = message or f"HTTP error {status_code}"
        super().__init__(message)


class NetworkError(RestAPIError):
    """Exception raised when the request cannot reach the server."""

    def __init__(self, message="Network error during REST API request") -> None:
        super().__init__(message)


class RestTimeoutError(RestAPIError):
    """Exception raised when a request exceeds the configured timeout."""

    def __init__(self, message="REST API request timed out") -> None:
        super().__init__(message)


class JSONDecodeError(RestAPIError):
    """Exception raised when the response body is not a JSON object."""

    def __init__(self, message="Failed to decode JSON response from REST API") -> None:
        super().__init__(message)
