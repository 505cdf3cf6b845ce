"""Configuration management for minsh."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogProfile = Literal["default", "rich"]
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, read from ``MINSH_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="MINSH_", case_sensitive=False)

    prompt: str = Field(default="$ ", description="Prompt printed before each line is read")
    history_file: Optional[Path] = Field(None, description="Optional file for interactive line history")

    # Logging Configuration
    log_level: LogLevel = Field(default="WARNING", description="Log level")
    log_profile: LogProfile = Field(default="default", description="Log output profile")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        **overrides: Values that take precedence over the environment

    Returns:
        Settings instance

    Raises:
        pydantic.ValidationError: if a value from the environment or an override is invalid
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**updates)
