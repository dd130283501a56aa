"""Configuration management for minishell."""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_PROMPT = "$ "
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Shell settings."""

    model_config = SettingsConfigDict(
        env_prefix="MINISHELL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default=DEFAULT_PROMPT, description="Prompt rendered before each line")
    log_level: str = Field(default="WARNING", description="Log level for diagnostics on stderr")
    log_profile: str = Field(default="default", description="Log sink profile (default, rich)")
    history_file: Optional[Path] = Field(None, description="Optional file for persistent line history")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_profile")
    @classmethod
    def check_log_profile(cls, value: str) -> str:
        profile = value.strip().lower()
        if profile not in ("default", "rich"):
            raise ValueError(f"unknown log profile: {value}")
        return profile


def get_settings(**overrides: Any) -> Settings:
    """Get shell settings.

    Args:
        overrides: Explicit values (e.g. from CLI options); ``None`` values are ignored

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value fails validation
    """
    # pydantic-settings loads the environment and .env file; explicit values win.
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
