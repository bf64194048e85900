r"""Structured logging utilities for machine-readable log output.

The aggregator reports each fan-out through ``log_structured`` so that
slot names and timings land as separate fields. Those fields only show
up as JSON when the opt-in ``StructuredFormatter`` is installed:

    ```python
    import logging
    from afanout.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("afanout")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

A correlation id ties together the records emitted while loading one
aggregate. It lives in a context variable, so concurrently running
tasks each see their own value:

    ```python
    from afanout import load_all
    from afanout.utils.structured_logging import clear_correlation_id, set_correlation_id

    set_correlation_id("dashboard-42")
    try:
        result = await load_all({"profile": fetch_profile})
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "afanout_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else came from ``extra``
_RESERVED_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., request ID, trace ID).

    Example:
        ```pycon
        >>> from afanout.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("load-456")
        >>> get_correlation_id()
        'load-456'
        >>> clear_correlation_id()

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes one JSON object with the fields ``timestamp``,
    ``level``, ``logger``, ``message``, ``module``, ``function`` and
    ``line``, plus ``correlation_id`` when one is set, ``exception`` when
    the record carries exception info, and every field passed through
    ``extra``. Values that JSON cannot encode are rendered with ``str``.

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from afanout.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("afanout.doctest")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Loaded", extra={"slots": ["profile"]})
        >>> '"slots": ["profile"]' in stream.getvalue()
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record creation time as ISO 8601 UTC with
        millisecond precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    logger.log(level, message, extra=extra)
