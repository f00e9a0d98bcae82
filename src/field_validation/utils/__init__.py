"""Shared utilities and helpers for the field-validation package."""

from field_validation.utils.logging import configure_logging, get_logger, reset_logging

__all__ = ["configure_logging", "get_logger", "reset_logging"]
