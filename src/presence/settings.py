"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so an application can tune how the library logs
without code changes:
  - PRESENCE_LOG_LEVEL  → log_level
  - PRESENCE_JSON_LOGS  → json_logs

Settings only influence logging. Container behavior never depends on them.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PresenceSettings(BaseSettings):
    """
    Logging settings for the presence library.

    Load order (highest priority first):
      1. Environment variables (PRESENCE_*)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="PRESENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Level name for the presence logger")
    json_logs: bool = Field(default=False, description="Render log lines as JSON instead of console text")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the logging module doesn't know; normalize to upper case."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
