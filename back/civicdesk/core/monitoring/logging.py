# Standard library imports
from collections.abc import MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Local application imports
from civicdesk.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[36;20m",  # cyan
    logging.INFO: "\x1b[38;20m",  # grey
    logging.WARNING: "\x1b[33;20m",  # yellow
    logging.ERROR: "\x1b[31;20m",  # red
    logging.CRITICAL: "\x1b[31;1m",  # bold red
}
_RESET = "\x1b[0m"


class ConsoleFormatter(logging.Formatter):
    """Colors the whole line by level. Colors are dropped when stdout is not a terminal."""

    def __init__(self, use_colors: bool | None = None):
        super().__init__(LOG_FORMAT)
        self.use_colors = sys.stdout.isatty() if use_colors is None else use_colors
        self._formatters = {
            level: logging.Formatter(f"{color}{LOG_FORMAT}{_RESET}") for level, color in _LEVEL_COLORS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)
        return self._formatters.get(record.levelno, self).format(record)


def _default_level() -> int:
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL.upper())
    return logging.DEBUG if settings.DEBUG_MODE else logging.INFO


@lru_cache
def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Logger with a single stdout handler.

    Cached per name so handlers are never stacked. In production, warnings
    and errors also reach Sentry through the logging integration installed
    by ``setup_sentry``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level if level is not None else _default_level()
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)
    return logger


class ContextLogger(logging.LoggerAdapter[logging.Logger]):
    """Appends ``[key=value ...]`` to every message, e.g. the complaint a log line is about."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        if not self.extra:
            return msg, kwargs
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"{msg} [{context}]", kwargs


def get_contextual_logger(name: str, **context: Any) -> ContextLogger:
    return ContextLogger(get_logger(name), context)
