"""Tests for configuration loading and validation."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from stackglyph.config.loader import (
    assembler_from_config,
    load_config,
    substitute_env_vars,
)
from stackglyph.config.schema import LoggingConfig, StackGlyphConfig, TraceConfig
from stackglyph.utils.errors import ConfigError


class TestSubstituteEnvVars:
    """Test environment variable substitution."""

    def test_substitute_single_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting a single environment variable."""
        monkeypatch.setenv("TEST_VAR", "test_value")
        assert substitute_env_vars("Value is ${TEST_VAR}") == "Value is test_value"

    def test_missing_env_var_raises(self) -> None:
        """Test that missing environment variables raise ConfigError."""
        os.environ.pop("MISSING", None)
        with pytest.raises(ConfigError, match="Environment variable MISSING not found"):
            substitute_env_vars("Value is ${MISSING}")

    def test_no_substitution_needed(self) -> None:
        """Test text without environment variables passes through unchanged."""
        assert substitute_env_vars("plain $text") == "plain $text"


class TestTraceConfig:
    """Test TraceConfig validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = TraceConfig()

        assert config.max_cause_depth == 64
        assert config.no_file_placeholder == "[no file]"

    def test_negative_depth_rejected(self) -> None:
        """Test the lower bound on max_cause_depth."""
        with pytest.raises(ValidationError):
            TraceConfig(max_cause_depth=-1)

    def test_blank_placeholder_rejected(self) -> None:
        """Test that a blank placeholder is rejected."""
        with pytest.raises(ValidationError, match="must not be blank"):
            TraceConfig(no_file_placeholder="  ")


class TestLoggingConfig:
    """Test LoggingConfig validation."""

    def test_invalid_level_rejected(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestStackGlyphConfig:
    """Test the root settings object."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test nested settings from prefixed environment variables."""
        monkeypatch.setenv("STACKGLYPH_TRACE__MAX_CAUSE_DEPTH", "5")
        assert StackGlyphConfig().trace.max_cause_depth == 5


class TestLoadConfig:
    """Test load_config."""

    def test_load_full_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading a YAML file with env substitution."""
        monkeypatch.setenv("SG_DEPTH", "8")
        path = tmp_path / "config.yaml"
        path.write_text(
            "trace:\n"
            "  max_cause_depth: ${SG_DEPTH}\n"
            "  no_file_placeholder: '<?>'\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  format: json\n"
        )

        config = load_config(path)

        assert config.trace.max_cause_depth == 8
        assert config.trace.no_file_placeholder == "<?>"
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file is the default configuration."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path).trace.max_cause_depth == 64

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparseable YAML raises ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("trace: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a top-level list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_config(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Test that values outside the schema raise ConfigError."""
        path = tmp_path / "config.yaml"
        path.write_text("trace:\n  max_cause_depth: -3\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)


class TestAssemblerFromConfig:
    """Test building an assembler from configuration."""

    def test_settings_applied(self) -> None:
        """Test that trace settings reach the assembler."""
        config = StackGlyphConfig(trace=TraceConfig(max_cause_depth=2, no_file_placeholder="-"))

        assembler = assembler_from_config(config)

        assert assembler.max_cause_depth == 2
        assert assembler.no_file_placeholder == "-"
