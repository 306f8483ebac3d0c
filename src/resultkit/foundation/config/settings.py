"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.boundary.log_captures
    True

    # Or with environment variables:
    # RESULTKIT_LOG_LEVEL=DEBUG
    # RESULTKIT_BOUNDARY_LOG_CAPTURES=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class BoundarySettings(BaseSettings):
    """Capture-boundary behavior."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_BOUNDARY_",
        extra="ignore",
    )

    log_captures: bool = Field(default=True, description="Emit a debug event for every captured failure")


class ResultkitSettings(BaseSettings):
    """Root settings for resultkit.

    Loads configuration from environment variables with RESULTKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        RESULTKIT_DEBUG=true
        RESULTKIT_LOG_LEVEL=DEBUG
        RESULTKIT_LOG_FORMAT=json
        RESULTKIT_BOUNDARY_LOG_CAPTURES=false
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with RESULTKIT_LOG_, RESULTKIT_BOUNDARY_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    boundary: BoundarySettings = Field(default_factory=BoundarySettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, else the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultkitSettings:
    """Get the global settings instance (cached)."""
    return ResultkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
