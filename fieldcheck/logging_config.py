"""structlog configuration for applications embedding fieldcheck.

The library itself only calls `structlog.get_logger()`; nothing is configured
on import. Call `configure_logging()` once at startup to get the same
processor chain in every process.
"""

import logging
from typing import Optional

import structlog

from fieldcheck.config import Settings, get_settings


def _level_number(level_name: str) -> int:
    """Translate a level name such as 'info' or 'DEBUG' to its numeric value."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{level_name}'")
    return level


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog from settings.

    Args:
        settings: Optional settings. If None, uses `get_settings()`.
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(settings.LOG_LEVEL)),
        cache_logger_on_first_use=False,
    )
