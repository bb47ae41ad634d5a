"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the CLI.
- Lets flags fall back to per-user defaults (`CITY_POP_QUIET=1`, ...).
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) keeps the core free of it.
    - A single configuration contract for CLI and services.
    """

    model_config = SettingsConfigDict(
        env_prefix="CITY_POP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum loguru level written to stderr.",
    )
    quiet: bool = Field(
        default=False,
        description="Default for --quiet: hide the not-found message.",
    )
    show_unknown: bool = Field(
        default=False,
        description="Default for --show-unknown: include rows with unknown population.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            level = value.strip().upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(LOG_LEVELS)}")
            return level
        return value
