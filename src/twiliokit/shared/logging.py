"""
Structured JSON logging configuration.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from twiliokit.config import TwilioSettings

LOG_LEVEL = os.getenv("TWILIO_LOG_LEVEL", "INFO").upper()

# Module loggers are children of this one and propagate to it
PACKAGE_LOGGER = "twiliokit"

# Context variable for correlation ID
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    # Attributes every LogRecord carries; anything else came in through extra=
    _RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
        "message",
        "asctime",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = correlation_id_var.get()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        for k, v in record.__dict__.items():
            if k in self._RESERVED:
                continue
            if k in log_data:
                log_data[f"extra_{k}"] = v
            else:
                log_data[k] = v

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``twiliokit`` package logger.

    Until ``setup_logging`` runs, the package logger writes JSON lines to
    stdout at ``TWILIO_LOG_LEVEL``.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        package_logger.addHandler(handler)
        package_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    return logging.getLogger(name)


def setup_logging(settings: TwilioSettings) -> None:
    """Configure structured JSON logging on the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers = [handler]

    # Package records now reach the root handler; NullHandler keeps get_logger
    # from reinstalling the default stdout handler
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [logging.NullHandler()]
    package_logger.setLevel(settings.log_level.upper())

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def mask(value: str | None, keep: int = 6) -> str:
    """Mask an identifier or secret before it reaches a log record."""
    if not value:
        return ""
    if len(value) <= keep:
        return "*" * len(value)
    return f"{value[:keep]}***"
