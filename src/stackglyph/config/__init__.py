"""Configuration loading and validation."""

from .loader import (
    apply_logging_config,
    assembler_from_config,
    load_config,
    substitute_env_vars,
)
from .schema import FileLoggingConfig, LoggingConfig, StackGlyphConfig, TraceConfig

__all__ = [
    # Loader
    "load_config",
    "substitute_env_vars",
    "assembler_from_config",
    "apply_logging_config",
    # Root config
    "StackGlyphConfig",
    # Sections
    "TraceConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
