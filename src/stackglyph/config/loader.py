"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from ..core.assembler import TraceAssembler
from ..utils.errors import ConfigError
from ..utils.logging import LogEventNames, configure_logging
from .schema import StackGlyphConfig

log = structlog.get_logger()


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ConfigError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> StackGlyphConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    An empty file yields the defaults.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated StackGlyphConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigError: If environment variables are missing or the file is
            not valid YAML or doesn't match the schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open(encoding="utf-8") as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    try:
        config_dict = yaml.safe_load(yaml_with_env) or {}
    except yaml.YAMLError as e:
        log.error(LogEventNames.CONFIG_ERROR, path=str(path), error=str(e))
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")

    try:
        config = StackGlyphConfig.model_validate(config_dict)
    except ValidationError as e:
        log.error(LogEventNames.CONFIG_ERROR, path=str(path), error=str(e))
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    log.debug(LogEventNames.CONFIG_LOADED, path=str(path))
    return config


def assembler_from_config(config: StackGlyphConfig) -> TraceAssembler:
    """Build a TraceAssembler from the ``trace`` section."""
    return TraceAssembler(
        max_cause_depth=config.trace.max_cause_depth,
        no_file_placeholder=config.trace.no_file_placeholder,
    )


def apply_logging_config(config: StackGlyphConfig) -> None:
    """Configure structlog from the ``logging`` section."""
    configure_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        file_path=config.logging.file.path,
        file_enabled=config.logging.file.enabled,
    )
