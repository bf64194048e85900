r"""Functional entry point for retrying a single async operation."""

from __future__ import annotations

__all__ = ["retry_with_backoff"]

from typing import TYPE_CHECKING, TypeVar

from afanout.retry import AsyncRetryExecutor, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from afanout.retry import CallbackConfig

T = TypeVar("T")


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    max_retries: int | None = None,
    base_delay: float | None = None,
    callbacks: CallbackConfig | None = None,
) -> T:
    """Await an operation, retrying failures according to their
    classification.

    Errors whose message contains ``"429"`` are retried after
    ``base_delay * 2 ** attempt`` seconds, every other error is retried
    immediately. The error of the last attempt is raised unchanged once
    ``max_retries`` retries have failed.

    Args:
        operation: Zero-argument coroutine function to execute.
        policy: Retry policy. Defaults to ``RetryPolicy()``
            (3 retries, 0.1s base delay).
        max_retries: Overrides ``policy.max_retries`` if provided.
        base_delay: Overrides ``policy.base_delay`` if provided.
        callbacks: Optional lifecycle callbacks.

    Returns:
        The value of the first successful attempt.

    Raises:
        ValueError: If the retry parameters are invalid.
        Exception: The error of the last attempt.

    Example:
        ```pycon
        >>> import asyncio
        >>> from afanout import retry_with_backoff
        >>> calls = []
        >>> async def flaky() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise RuntimeError("500 Internal Server Error")
        ...     return "ok"
        ...
        >>> asyncio.run(retry_with_backoff(flaky))
        'ok'
        >>> len(calls)
        2

        ```
    """
    policy = (policy if policy is not None else RetryPolicy()).merge(
        max_retries=max_retries, base_delay=base_delay
    )
    return await AsyncRetryExecutor(policy, callbacks).execute(operation)
