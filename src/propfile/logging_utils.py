"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Any

from .config import LoggingConfig

# Record attributes that load and lookup messages attach through ``extra``.
EXTRA_FIELDS = ("resource", "category", "key")


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the known extra fields set on ``record``, in EXTRA_FIELDS order."""

    extras: dict[str, Any] = {}
    for field in EXTRA_FIELDS:
        value = getattr(record, field, None)
        if value is not None:
            extras[field] = value
    return extras


class PlainFormatter(logging.Formatter):
    """Human-readable lines with a ``[resource=... category=...]`` suffix."""

    def __init__(self) -> None:
        super().__init__("%(levelname)s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        context = " ".join(f"{key}={value}" for key, value in extras.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{context}]{sep}{tail}"


class JsonFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        payload.update(record_extras(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_handler(config: LoggingConfig) -> logging.Handler:
    if config.log_file:
        return RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
    # stderr keeps CLI stdout free for property output.
    return logging.StreamHandler()


def configure_logging(config: LoggingConfig) -> list[logging.Handler]:
    """Install one handler on the root logger and return the installed handlers.

    Repeated calls replace the handlers of earlier calls.
    """

    level = getattr(logging, config.level.upper(), logging.INFO)
    handler = _build_handler(config)
    handler.setFormatter(JsonFormatter() if config.json_format else PlainFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return [handler]
