from __future__ import annotations

import logging
import time
from logging.config import dictConfig
from typing import Iterable, Optional, Sequence

from settings import get_settings

_DEFAULT_EXTRA_KEYS = (
    "station",
    "path",
    "reading_count",
    "outside_count",
    "floor",
    "ceiling",
    "reason",
    "error_count",
)

_active_level: Optional[int] = None


class ContextualFormatter(logging.Formatter):
    """Formats records in UTC and appends known ``extra=`` fields as ``key=value``."""

    converter = time.gmtime

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self._extra_keys
            if getattr(record, key, None) is not None
        ]
        if context:
            return f"{message} | {' '.join(context)}"
        return message


def resolve_level(level: str | int) -> int:
    """Map a level name such as ``"debug"`` or a numeric level to its integer value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}.")
    return resolved


def configure_logging(level: str | int | None = None) -> None:
    """Send root logging to stderr through ``ContextualFormatter``.

    Repeated calls with the level already in effect are no-ops; a different
    level rebuilds the handler so the new threshold applies.
    """
    global _active_level

    log_level = resolve_level(level if level is not None else get_settings().log_level)
    if log_level == _active_level:
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "logging_config.ContextualFormatter",
                    "fmt": "%(asctime)sZ | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "extra_keys": list(_DEFAULT_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
        }
    )

    _active_level = log_level
