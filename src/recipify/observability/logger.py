"""Structured JSON logging for recipify.

Each record is written as one JSON object per line so request logs from
the hosting platform can be searched by field::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "INFO",
     "logger": "recipify.pipeline", "message": "stage complete",
     "op": "extract", "url": "https://example.com/soup", "elapsed_ms": 812.4}

Structured fields are passed with ``extra={"extra_fields": {...}}``.
Anything under a sensitive key (``api_key``, ``token``...) is masked, and
secrets registered with :func:`register_secrets` are scrubbed from the
message and every field.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from recipify.utils.redact import redact, redact_text

_secrets: set[str] = set()


def register_secrets(secrets: Iterable[str]) -> None:
    """Add credentials that must never appear in log output."""
    _secrets.update(s for s in secrets if s)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line, redacted JSON objects.

    Guaranteed keys: ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  ``exception`` and ``stack_info`` are added when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        secrets = tuple(_secrets)
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_text(record.getMessage(), secrets),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            log_entry.update(redact(extra_fields, secrets))

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = redact_text(
                self.formatException(record.exc_info), secrets
            )

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name so repeated ``get_logger`` calls do not stack
# handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "recipify",
    *,
    level: int | str = logging.INFO,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Modules use children of ``"recipify"`` such as
        ``"recipify.pipeline"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
