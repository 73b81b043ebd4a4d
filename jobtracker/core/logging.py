"""Logging setup: JSON lines in production, colored single lines elsewhere.

Services log with ``extra=`` fields (``owner_id``, ``job_id``, ``fields``);
both formatters carry those fields through.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

from .config import settings

# Attributes every LogRecord has; anything else on a record came from ``extra=``
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def record_extra(record: logging.LogRecord) -> dict[str, Any]:
    """Return the caller-supplied fields of ``record``, stringifying anything not JSON-safe."""
    extra: dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in _STANDARD_ATTRS or key.startswith("_"):
            continue
        try:
            json.dumps(value)
        except (TypeError, ValueError):
            value = str(value)
        extra[key] = value
    return extra


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with caller fields nested under ``extra``."""

    def __init__(self, include_extra: bool = True) -> None:
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }
        if record.stack_info:
            entry["stack_info"] = record.stack_info
        if self.include_extra and (extra := record_extra(record)):
            entry["extra"] = extra
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """``time - LEVEL - logger - message [key=value ...]`` with a colored level."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        line = (
            f"{_timestamp(record):%Y-%m-%d %H:%M:%S} - "
            f"{color}{record.levelname:8}{self.RESET} - {record.name} - {record.getMessage()}"
        )
        extra = record_extra(record)
        if extra:
            line += " [" + " ".join(f"{key}={value}" for key, value in extra.items()) + "]"
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return line


def build_formatter() -> logging.Formatter:
    """``LOG_FORMAT`` wins when set; otherwise JSON in production, console elsewhere."""
    choice = (settings.log_format or "").lower()
    if choice == "json" or (choice != "console" and settings.is_production):
        return JSONFormatter()
    return ConsoleFormatter()


def setup_logging() -> None:
    """Replace root handlers with a single stdout handler at ``LOG_LEVEL``."""
    level = logging.getLevelName(settings.log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for noisy, noisy_level in (
        ("sqlalchemy.engine", logging.WARNING),
        ("uvicorn.access", logging.WARNING),
        ("passlib", logging.ERROR),
    ):
        logging.getLogger(noisy).setLevel(noisy_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Bind context (e.g. ``owner_id``) to every record; per-call ``extra`` is merged in.

    >>> log = LoggerAdapter(get_logger(__name__), {"owner_id": 7})
    >>> log.info("Created job", extra={"job_id": 42})
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        kwargs["extra"] = {**(kwargs.get("extra") or {}), **self.extra}
        return msg, kwargs
