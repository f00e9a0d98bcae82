"""
Structured logging setup (structlog).

Package loggers wrap stdlib loggers under the ``field_validation`` namespace,
which carries a NullHandler, so nothing is emitted until the host application
configures stdlib logging or calls configure_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog

from field_validation.config.settings import LoggingSettings, get_settings

PACKAGE_LOGGER_NAME = "field_validation"

# handler installed by configure_logging(), replaced on reconfigure
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(settings: Optional[LoggingSettings] = None, **kwargs: Any) -> None:
    """
    Configure structlog from LoggingSettings and attach a stdout handler to
    the package logger.

    Keyword overrides (log_level, log_format) take precedence over settings,
    e.g. configure_logging(log_level="DEBUG") to see rejection events.
    """
    global _handler
    if settings is None:
        settings = get_settings().logging
    if kwargs:
        settings = LoggingSettings.model_validate({**settings.model_dump(), **kwargs})

    level = getattr(logging, settings.log_level)
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging(): drop the handler and restore structlog defaults."""
    global _handler
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()
