"""Logging configuration for the application."""

import logging
import sys
import json
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID


ROOT_LOGGER_NAME = "budgeting"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Structured fields passed with ``extra=``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_KEYS
    }


class _LogEncoder(json.JSONEncoder):
    """Encode ids, amounts and enum codes found in log context."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (UUID, Decimal)):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(_context_fields(record))

        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            log_data["exception_type"] = type(error).__name__
            # Domain errors carry a stable code worth indexing on.
            if hasattr(error, "code"):
                log_data["error_code"] = error.code
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, cls=_LogEncoder, default=str)


class TextFormatter(logging.Formatter):
    """Custom text formatter with colors for development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors, context appended as key=value."""
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8s}{reset} - "
            f"{record.name} - {record.getMessage()}"
        )

        context = _context_fields(record)
        if context:
            log_message += " | " + " ".join(f"{key}={value}" for key, value in context.items())

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "json"
) -> logging.Logger:
    """
    Configure the application root logger.

    Every logger obtained through ``get_logger`` is a child of this one, so a
    single call configures use cases, repositories and the database layer.

    Args:
        name: Root logger name
        level: Log level name, case-insensitive
        log_format: "json" for structured lines, anything else for coloured text

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger under the application root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
