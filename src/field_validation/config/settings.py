"""
Field Validation Settings Configuration

This module provides centralized configuration management using Pydantic settings.
Configuration is loaded from .env by default; alternative YAML loading is supported.
"""

from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationSettings(BaseSettings):
    """
    Tunable bounds for the heuristic validators: mobile number length window
    and the URL schemes accepted as well-formed.
    """

    model_config = SettingsConfigDict(env_prefix="VALIDATION_", extra="ignore")

    mobile_min_length: int = Field(default=7, ge=1, description="Shortest accepted mobile number (characters)")
    mobile_max_length: int = Field(default=13, ge=1, description="Longest accepted mobile number (characters)")
    url_schemes: List[str] = Field(
        default_factory=lambda: ["http", "https", "ftp", "file", "jar", "mailto"],
        description="URL schemes accepted by is_url_valid",
    )

    @field_validator("url_schemes")
    @classmethod
    def validate_url_schemes(cls, v: List[str]) -> List[str]:
        schemes = [s.strip().lower() for s in v if s.strip()]
        if not schemes:
            raise ValueError("url_schemes must contain at least one scheme")
        return schemes

    @model_validator(mode="after")
    def validate_mobile_bounds(self) -> "ValidationSettings":
        if self.mobile_min_length > self.mobile_max_length:
            raise ValueError("mobile_min_length must not exceed mobile_max_length")
        return self


class LoggingSettings(BaseSettings):
    """Log level and renderer used by configure_logging(); quiet (WARNING) by default."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="console", description="Format: 'json' or 'console'")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class Settings(BaseSettings):
    """
    Root settings class. Loads from .env by default; supports creation from YAML.

    Nested models: validation, logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings, description="Validator bounds")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (validation, logging).
        Environment variables still override when present.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("validation", ValidationSettings),
            ("logging", LoggingSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance (loads from .env)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Force reload of settings from environment."""
    global _settings
    _settings = Settings()
    return _settings
