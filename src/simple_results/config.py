"""
Configuration — typed, validated settings for result reporting.

Uses pydantic-settings to load from environment variables prefixed with
SIMPLE_RESULTS_ (SIMPLE_RESULTS_LOG_LEVEL, SIMPLE_RESULTS_JSON_LOGS, ...),
falling back to a .env file in the working directory, then to defaults.

Only the reporting helpers read these settings. Failure, Result and
ObjectResult have no configuration.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("debug", "info", "warning", "error", "critical")


class ReportingSettings(BaseSettings):
    """
    Settings for structlog configuration and failure reporting.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_RESULTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level emitted by structlog")
    json_logs: bool = Field(default=False, description="Render JSON lines instead of console output")
    include_description: bool = Field(
        default=True,
        description="Add the failure description to each reported event",
    )
    warning_level: str = Field(default="warning", description="Log method used for warnings")
    error_level: str = Field(default="error", description="Log method used for errors")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any stdlib level name, case-insensitively."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("warning_level", "error_level")
    @classmethod
    def validate_method_level(cls, value: str) -> str:
        """Reject names structlog loggers have no method for."""
        level = value.strip().lower()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"Level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}"
            )
        return level
