"""Configuration for field_validation (pydantic-settings)."""

from field_validation.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "reload_settings",
]
