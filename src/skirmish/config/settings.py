"""Configuration settings using Pydantic Settings.

Usage:
    from skirmish.config import SkirmishSettings

    # Load from environment variables (SKIRMISH_*)
    settings = SkirmishSettings()

    # Or override with explicit values
    settings = SkirmishSettings(log_level="DEBUG")
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SkirmishSettings(BaseSettings):  # type: ignore[misc]
    """Logging configuration for the demo and library loggers.

    Attributes:
        log_level: Level for the ``skirmish`` logger, DEBUG or INFO. Strike
            lines are INFO records and are never filtered out.
            Session lifecycle messages are DEBUG.
        log_format: ``logging`` format string for the stdout handler.

    Environment Variables:
        SKIRMISH_LOG_LEVEL
        SKIRMISH_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="SKIRMISH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO"] = "INFO"
    log_format: str = Field(default="%(message)s", min_length=1)
