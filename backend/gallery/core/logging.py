"""
Structured logging configuration using structlog
Flow: get_logger(name) -> contextvars (request id, user id) -> processors -> stdlib handler

Everything is rendered by structlog and handed to the standard library
logger of the same name, so uvicorn, alembic and pytest's caplog all see
the same lines. Values bound with structlog.contextvars (the request
middleware binds request_id, method, path and user_id) are merged into
every event logged while handling that request, including service logs.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from structlog.processors import CallsiteParameter

from gallery.config.settings import get_settings

REQUEST_ID_HEADER = "X-Request-ID"

# Library loggers and the level they run at outside DEBUG
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,  # LoggingMiddleware logs every request
    "sqlalchemy.engine": logging.WARNING,
    "aiosqlite": logging.WARNING,
}


def add_catalog_source(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Tag events with the catalog backend, so static and database deployments read apart."""
    event_dict.setdefault("catalog_source", get_settings().CATALOG_SOURCE)
    return event_dict


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog and the standard library root logger."""
    settings = get_settings()
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    log_format = (log_format or settings.LOG_FORMAT).lower()

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_catalog_source,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[CallsiteParameter.FILENAME, CallsiteParameter.LINENO]
        ),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance, optionally with values bound up front."""
    logger = structlog.get_logger(name)
    if kwargs:
        logger = logger.bind(**kwargs)
    return logger


setup_logging()
