"""Structured JSON logging configuration.

Records are written to stdout as one JSON object per line. Request metadata
fields are optional so third-party records format without errors.
"""

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

_REQUEST_FIELDS = ("request_id", "http_method", "request_path", "status_code", "duration_ms", "client_key")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON objects with optional request metadata."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field_name in _REQUEST_FIELDS:
            field_value = getattr(record, field_name, None)
            if field_value is not None:
                payload[field_name] = field_value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def observability_setup_logging(level: str = "INFO") -> None:
    """Configure root and server logging to emit JSON on stdout.

    Args:
        level: Root logger level name.

    Returns:
        None: Logging is configured as a side effect.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "app.observability.log.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                # Request completion is logged by the HTTP logging middleware.
                "uvicorn.access": {"level": "WARNING"},
            },
            "root": {
                "level": level.upper(),
                "handlers": ["default"],
            },
        }
    )
