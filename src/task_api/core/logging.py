"""Structured JSON logging with per-request correlation ids.

Every record rendered by :class:`JsonLogFormatter` carries the same envelope
(``timestamp``, ``level``, ``logger``, ``message``, ``request_id`` plus the
service name and environment). The only other keys that appear are the event
fields listed in ``EVENT_FIELDS``, which the API modules pass through
``extra=``. Everything else on a ``LogRecord`` is ignored.
"""

from __future__ import annotations

import json
import logging
import logging.config
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Iterator

from .config import Settings

NO_REQUEST_ID = "-"

EVENT_FIELDS = (
    # access log
    "method",
    "path",
    "status_code",
    "duration_ms",
    # domain events
    "user_id",
    "username",
    "role",
    "task_id",
    "assigned_to",
    "fields",
    "reason",
    "database",
    "errors",
)

_request_id: ContextVar[str] = ContextVar("task_api_request_id", default=NO_REQUEST_ID)


def current_request_id() -> str:
    """Return the id of the request being served, or ``"-"`` outside a request."""
    return _request_id.get()


@contextmanager
def request_id_scope(request_id: str) -> Iterator[str]:
    """Bind ``request_id`` for log records emitted inside the ``with`` block."""
    token = _request_id.set(request_id)
    try:
        yield request_id
    finally:
        _request_id.reset(token)


class RequestIdFilter(logging.Filter):
    """Stamp each record with the request id bound when it was emitted."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = current_request_id()
        return True


class JsonLogFormatter(logging.Formatter):
    """Render a record as one JSON line: the envelope plus known event fields."""

    def __init__(self, *, service: str, environment: str) -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", NO_REQUEST_ID),
            "service": self._service,
            "environment": self._environment,
        }
        for name in EVENT_FIELDS:
            if name in record.__dict__:
                entry[name] = record.__dict__[name]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``settings``.

    Application loggers and uvicorn's server loggers share one stdout handler.
    ``uvicorn.access`` is muted because request lines come from the access
    log middleware instead.
    """

    level = settings.log_level
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    shared = {"handlers": ["stdout"], "level": level, "propagate": False}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "formatters": {
            "json": {
                "()": JsonLogFormatter,
                "service": settings.project_name,
                "environment": settings.environment,
            }
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "json",
                "filters": ["request_id"],
            }
        },
        "root": {"handlers": ["stdout"], "level": level},
        "loggers": {
            "uvicorn": dict(shared),
            "uvicorn.error": dict(shared),
            "uvicorn.access": {"handlers": [], "level": "WARNING", "propagate": False},
        },
    }


def configure_logging(settings: Settings) -> None:
    """Install the JSON logging configuration for ``settings``."""
    logging.config.dictConfig(build_logging_config(settings))


__all__ = [
    "EVENT_FIELDS",
    "JsonLogFormatter",
    "NO_REQUEST_ID",
    "RequestIdFilter",
    "build_logging_config",
    "configure_logging",
    "current_request_id",
    "request_id_scope",
]
