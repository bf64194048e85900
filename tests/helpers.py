r"""Shared helpers for building fake operations in tests."""

from __future__ import annotations

__all__ = ["RATE_LIMIT_ERROR", "SERVER_ERROR", "delayed", "recording"]

import asyncio
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

RATE_LIMIT_ERROR = "429 Too Many Requests"
SERVER_ERROR = "500 Internal Server Error"


def delayed(value: Any, delay: float) -> Callable[[], Awaitable[Any]]:
    """Return an operation that resolves to ``value`` after ``delay``
    seconds."""

    async def operation() -> Any:
        await asyncio.sleep(delay)
        return value

    return operation


def recording(
    name: str, value: Any, delay: float, events: list[str]
) -> Callable[[], Awaitable[Any]]:
    """Return an operation that appends ``<name>-start`` and
    ``<name>-end`` to ``events`` around a ``delay`` second wait."""

    async def operation() -> Any:
        events.append(f"{name}-start")
        await asyncio.sleep(delay)
        events.append(f"{name}-end")
        return value

    return operation
