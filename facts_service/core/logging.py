import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

from facts_service.core.config import get_settings

# Correlation ID of the request being served
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

CONSOLE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(correlation_id)s] - %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the correlation ID of the current request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get()
        return True


class StructuredLogFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "correlation_id", "")
        if request_id:
            entry["correlation_id"] = request_id

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info)
            }

        # Fields passed as extra={"data": {...}}
        data = getattr(record, "data", None)
        if isinstance(data, dict):
            entry.update(data)

        return json.dumps(entry, default=str)


def configure_logging() -> logging.Handler:
    """
    Install the service's stdout handler on the root logger.

    JSON records are written when ENABLE_STRUCTURED_LOGGING is set,
    console lines otherwise.

    Returns:
        logging.Handler: The installed handler
    """
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    if settings.ENABLE_STRUCTURED_LOGGING:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    # Request and outbound call lines come from the service's own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)


def set_correlation_id(corr_id: Optional[str] = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        corr_id: Incoming correlation ID; a UUID4 is generated when empty

    Returns:
        str: The bound correlation ID
    """
    corr_id = corr_id or str(uuid.uuid4())
    correlation_id.set(corr_id)
    return corr_id
