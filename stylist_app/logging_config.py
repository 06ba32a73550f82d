"""Structured JSON logging for the recommendation engine.

Every entry carries an ``event`` name and the correlation id of the request
being served. Taste-profile values (preferred styles, favorite colors, the
color preference) are withheld from log output; only their size is kept.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import uuid
from typing import Any, Dict, Iterator, Mapping

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes present on every LogRecord; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))) | {
    "message",
    "asctime",
}
PROFILE_FIELDS = frozenset(
    {
        "preferred_styles",
        "favorite_colors",
        "color_preference",
        "colorPreference",
    }
)
_WITHHELD = "<withheld"


def _withhold(value: Any) -> Any:
    if isinstance(value, str) and value.startswith(_WITHHELD):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{_WITHHELD}: n={len(value)}>"
    return f"{_WITHHELD}>"


def scrub_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``fields`` with taste-profile values replaced, nested mappings included."""

    scrubbed: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in PROFILE_FIELDS and value:
            scrubbed[key] = _withhold(value)
        elif isinstance(value, Mapping):
            scrubbed[key] = scrub_fields(value)
        else:
            scrubbed[key] = value
    return scrubbed


class JsonFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and key not in entry
        }
        entry.update(scrub_fields(extras))
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Send root logging to stderr as JSON lines."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, else keep the current one, else mint a new id."""

    current = correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex
    CORRELATION_ID.set(current)
    return current


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with scrubbed structured fields and the active correlation id."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **scrub_fields(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None, **attributes: Any) -> Iterator[str]:
    """Scope a correlation id to one engine operation; restored on exit."""

    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        scoped_id = CORRELATION_ID.get()
        log_event(
            logging.getLogger(__name__),
            logging.DEBUG,
            "operation_entered",
            operation=name,
            correlation_id=scoped_id,
            **attributes,
        )
        yield scoped_id
    finally:
        CORRELATION_ID.reset(token)


__all__ = [
    "configure_logging",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "scrub_fields",
]
