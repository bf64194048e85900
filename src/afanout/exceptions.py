r"""Exceptions raised by the HTTP-backed fetch operations."""

from __future__ import annotations

__all__ = ["FetchError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class FetchError(Exception):
    """Raised when an HTTP fetch fails.

    The message of an error built from a response starts with the status
    code (e.g. ``"429 Too Many Requests"``), which is what the retry
    executor classifies on. The URL is kept on ``url`` rather than in the
    message.

    Args:
        method: The HTTP method that was used.
        url: The URL that was requested.
        message: Human-readable error message.
        status_code: The HTTP status code, if a response was received.
        response: The HTTP response, if one was received.
        cause: The underlying transport exception, if any.
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.cause = cause
