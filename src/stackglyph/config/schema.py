"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TraceConfig(BaseModel):
    """Trace assembly configuration."""

    max_cause_depth: int = Field(64, ge=0, le=10_000, description="Max causes kept per trace")
    no_file_placeholder: str = "[no file]"

    @field_validator("no_file_placeholder")
    @classmethod
    def validate_placeholder(cls, v: str) -> str:
        """Reject placeholders that would render as nothing."""
        if not v.strip():
            raise ValueError("no_file_placeholder must not be blank")
        return v


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("stackglyph.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class StackGlyphConfig(BaseSettings):
    """Root configuration for stackglyph."""

    trace: TraceConfig = TraceConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="STACKGLYPH_",
        env_nested_delimiter="__",
    )
