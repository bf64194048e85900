r"""Classification of operation failures into retry categories."""

from __future__ import annotations

__all__ = ["ErrorClassification", "classify_error", "error_message"]

import logging
from enum import Enum

from afanout.core.config import RATE_LIMIT_TOKEN

logger: logging.Logger = logging.getLogger(__name__)


class ErrorClassification(Enum):
    """Retry category of a failed attempt.

    ``RATE_LIMITED`` failures are retried after an exponential backoff.
    ``TRANSIENT`` and ``OTHER`` failures are retried immediately.
    """

    RATE_LIMITED = "rate_limited"
    TRANSIENT = "transient"
    OTHER = "other"


def error_message(error: object) -> str:
    """Return the human-readable message of an error.

    Args:
        error: The error raised by an operation.

    Returns:
        ``str(error)``, or an empty string when the error cannot be
        rendered.
    """
    try:
        return str(error)
    except Exception:  # noqa: BLE001
        logger.debug(f"Could not render message of {type(error).__name__}")
        return ""


def classify_error(error: object) -> ErrorClassification:
    """Classify an error by looking for the rate-limit token in its
    message.

    Args:
        error: The error raised by an operation.

    Returns:
        ``ErrorClassification.RATE_LIMITED`` if the message contains
        ``"429"``, ``ErrorClassification.TRANSIENT`` otherwise. An error
        without a usable message is transient.

    Example:
        ```pycon
        >>> from afanout.retry.classify import classify_error
        >>> classify_error(RuntimeError("429 Too Many Requests"))
        <ErrorClassification.RATE_LIMITED: 'rate_limited'>
        >>> classify_error(RuntimeError("500 Internal Server Error"))
        <ErrorClassification.TRANSIENT: 'transient'>
        >>> classify_error(RuntimeError())
        <ErrorClassification.TRANSIENT: 'transient'>

        ```
    """
    if RATE_LIMIT_TOKEN in error_message(error):
        return ErrorClassification.RATE_LIMITED
    return ErrorClassification.TRANSIENT
