"""Utility functions and helpers.

This module provides:
- errors: Exception hierarchy
- logging: Structured logging configuration
"""

from stackglyph.utils.errors import ConfigError, InvalidNameError, StackGlyphError
from stackglyph.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    # Errors
    "ConfigError",
    "InvalidNameError",
    "StackGlyphError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
