"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    BoundarySettings,
    LoggingSettings,
    ResultkitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BoundarySettings",
    "LoggingSettings",
    "ResultkitSettings",
    "clear_settings_cache",
    "get_settings",
]
