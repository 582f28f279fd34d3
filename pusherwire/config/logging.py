"""Logging helpers for applications embedding pusherwire."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any

import msgspec

from .model import EncoderConfig

_RESERVED_LOG_KEYS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Encoder context attached through ``extra=``; rendered under "encoder".
_ENCODER_LOG_KEYS = (
    "event_index",
    "event_count",
    "channel_count",
    "body_size",
    "payload_size",
    "payload_limit",
)


def _serialise_value(value: Any) -> Any:
    """Serialise extra record values for JSON logs."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (bytes, bytearray)):
        # Bytes are rendered as hex, never decoded: [DE AD BE EF]
        return f"[{bytes(value).hex(' ').upper()}]"
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """Emit one JSON object per log line, trimming the package prefix.

    Counts and sizes logged by the encoders are grouped under ``encoder``;
    any other extra attribute lands in ``extra``.
    """

    PREFIX = "pusherwire."

    def format(self, record: logging.LogRecord) -> str:
        logger_name = record.name
        if logger_name.startswith(self.PREFIX):
            logger_name = logger_name[len(self.PREFIX) :]

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": logger_name,
            "message": record.getMessage(),
        }

        encoder_ctx = {
            key: _serialise_value(record.__dict__[key])
            for key in _ENCODER_LOG_KEYS
            if record.__dict__.get(key) is not None
        }
        if encoder_ctx:
            payload["encoder"] = encoder_ctx

        extras = {
            key: _serialise_value(value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_KEYS
            and key not in _ENCODER_LOG_KEYS
            and not key.startswith("_")
        }
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return msgspec.json.encode(payload).decode("utf-8")


def configure_logging(config: EncoderConfig) -> None:
    """Route the ``pusherwire`` logger to stderr as structured JSON."""

    level_name = "DEBUG" if config.debug_logging else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": "pusherwire.config.logging.StructuredLogFormatter",
                }
            },
            "handlers": {
                "pusherwire": {
                    "class": "logging.StreamHandler",
                    "level": level_name,
                    "formatter": "structured",
                }
            },
            "loggers": {
                "pusherwire": {
                    "level": level_name,
                    "handlers": ["pusherwire"],
                    "propagate": False,
                }
            },
        }
    )

    logging.getLogger("pusherwire").debug("Logging configured at level %s", level_name)


__all__ = ["StructuredLogFormatter", "configure_logging"]
