#!/usr/bin/env python3
"""Loguru-based logging for the FCS API client.

Import the shared logger and use it like a standard logger:

    from fcsapi.utils.loguru_setup import logger

    logger.configure_level("DEBUG")
    logger.debug("Request payload keys: ...")

Environment Variables:
    FCS_LOG_LEVEL: Global log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    FCS_LOG_FILE: Optional log file path for file output
    FCS_DISABLE_COLORS: Set to "true" to disable colored output
"""

import logging
import os
import sys
from pathlib import Path

from loguru import logger as _loguru_logger

# Remove default loguru handler to have full control
_loguru_logger.remove()

DEFAULT_LOG_LEVEL = os.getenv("FCS_LOG_LEVEL", "ERROR").upper()
LOG_FILE = os.getenv("FCS_LOG_FILE")
DISABLE_COLORS = os.getenv("FCS_DISABLE_COLORS", "false").lower() == "true"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

SIMPLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

_LEVEL_NAMES = {10: "DEBUG", 20: "INFO", 30: "WARNING", 40: "ERROR", 50: "CRITICAL"}


class FCSLogger:
    """Thin wrapper around loguru with level, file and color configuration."""

    def __init__(self) -> None:
        """Initialize the logger from environment configuration."""
        self._current_level = DEFAULT_LOG_LEVEL
        self._log_file = LOG_FILE
        self._disable_colors = DISABLE_COLORS
        self._setup_logger()

    def _setup_logger(self) -> None:
        _loguru_logger.remove()

        format_template = SIMPLE_FORMAT if self._disable_colors else LOG_FORMAT

        _loguru_logger.add(
            sys.stderr,
            level=self._current_level,
            format=format_template,
            colorize=not self._disable_colors,
            backtrace=True,
            diagnose=False,
        )

        if self._log_file:
            log_path = Path(self._log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            _loguru_logger.add(
                str(log_path),
                level=self._current_level,
                format=SIMPLE_FORMAT,
                rotation="10 MB",
                retention="1 week",
                compression="zip",
                backtrace=True,
                diagnose=False,
            )

    def configure_level(self, level: str) -> "FCSLogger":
        """Configure the log level.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

        Returns:
            Self for method chaining
        """
        self._current_level = level.upper()
        self._setup_logger()
        return self

    def configure_file(self, log_file: str | Path | None) -> "FCSLogger":
        """Configure file logging.

        Args:
            log_file: Path to log file, or None to disable file logging

        Returns:
            Self for method chaining
        """
        self._log_file = str(log_file) if log_file else None
        self._setup_logger()
        return self

    def disable_colors(self, disable: bool = True) -> "FCSLogger":
        """Enable or disable colored output."""
        self._disable_colors = disable
        self._setup_logger()
        return self

    # Delegate logging methods to loguru
    def debug(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).debug(message, *args, **kwargs)
        return self

    def info(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).info(message, *args, **kwargs)
        return self

    def warning(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).warning(message, *args, **kwargs)
        return self

    def error(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).error(message, *args, **kwargs)
        return self

    def critical(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).critical(message, *args, **kwargs)
        return self

    def exception(self, message: str, *args, **kwargs):
        _loguru_logger.opt(depth=1).exception(message, *args, **kwargs)
        return self

    def setLevel(self, level: str | int):
        """Set log level (stdlib-compatible spelling)."""
        if isinstance(level, int):
            level = _LEVEL_NAMES.get(level, "INFO")
        return self.configure_level(level)

    def getEffectiveLevel(self) -> str:
        return self._current_level

    def isEnabledFor(self, level: str | int) -> bool:
        """Check if logging is enabled for the given level."""
        if isinstance(level, int):
            level = _LEVEL_NAMES.get(level, "INFO")

        level_hierarchy = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        current_index = level_hierarchy.index(self._current_level)
        check_index = level_hierarchy.index(level.upper())
        return check_index >= current_index

    def add_sink(self, sink, **kwargs) -> int:
        """Attach an extra loguru sink and return its handler id."""
        return _loguru_logger.add(sink, **kwargs)

    def remove_sink(self, handler_id: int) -> None:
        _loguru_logger.remove(handler_id)


logger = FCSLogger()


def configure_level(level: str):
    """Configure the global logger level."""
    logger.configure_level(level)


def configure_file(log_file: str | Path | None):
    """Configure global file logging."""
    logger.configure_file(log_file)


def disable_colors(disable: bool = True):
    """Enable or disable colored output globally."""
    logger.disable_colors(disable)


def suppress_http_logging(suppress: bool = True) -> None:
    """Control httpx/httpcore logging globally.

    Args:
        suppress: If True, set to WARNING (quiet). If False, set to DEBUG (verbose).
    """
    level = logging.WARNING if suppress else logging.DEBUG
    for logger_name in ("httpcore", "httpx"):
        logging.getLogger(logger_name).setLevel(level)
