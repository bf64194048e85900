r"""Asynchronous classified retry executor.

This module provides the AsyncRetryExecutor class that awaits an
operation and retries it according to the classification of each
failure.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from afanout.retry.classify import error_message
from afanout.retry.config import CallbackConfig, RetryPolicy
from afanout.retry.decider import RetryDecider
from afanout.retry.manager import CallbackManager
from afanout.utils.sleep import sleep

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes an async operation with classified retries.

    The executor orchestrates the following components:
    - RetryDecider: Classifies each failure and picks the delay
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    An executor holds no state between calls to ``execute`` and can be
    shared by concurrently running operations.

    Attributes:
        policy: Retry policy with the maximum number of retries and the
            base delay.
        decider: Logic for deciding whether and when to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from afanout.retry import AsyncRetryExecutor, RetryPolicy
        >>> async def fetch() -> str:
        ...     return "ok"
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(max_retries=2))
        >>> asyncio.run(executor.execute(fetch))
        'ok'

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.policy = policy if policy is not None else RetryPolicy()
        self.decider: RetryDecider = RetryDecider(self.policy.max_retries, self.policy.base_delay)
        self.callbacks: CallbackManager = CallbackManager(
            callback_config if callback_config is not None else CallbackConfig(),
            self.policy.max_retries,
        )

    async def execute(self, operation: Callable[[], Awaitable[T]], name: str | None = None) -> T:
        """Await ``operation`` until it succeeds or retries are exhausted.

        Attempts the operation up to max_retries + 1 times. After a failed
        attempt the error is classified:
        - Rate limited (message contains "429"): waits
          base_delay * 2 ** attempt seconds, then retries
        - Anything else: retries immediately, without suspending

        Only ``Exception`` subclasses are retried. Cancellation and other
        ``BaseException`` subclasses propagate right away.

        Args:
            operation: Zero-argument coroutine function to execute.
            name: Optional label of the operation, used in log messages.

        Returns:
            The value produced by the first successful attempt.

        Raises:
            Exception: The error of the last attempt, unchanged, once all
                retries are exhausted.
        """
        label = name if name is not None else getattr(operation, "__name__", repr(operation))
        max_retries = self.policy.max_retries
        start_time = time.monotonic()
        attempt = 0
        while True:
            try:
                value = await operation()
            except Exception as exc:
                classification = self.decider.classify(exc)
                logger.debug(
                    f"{label} failed on attempt {attempt + 1}/{max_retries + 1} "
                    f"({classification.value}): {error_message(exc)}"
                )
                should_retry, reason = self.decider.should_retry(attempt)
                if not should_retry:
                    logger.debug(f"{label}: giving up ({reason})")
                    self.callbacks.on_failure(attempt, exc, start_time)
                    raise
                delay = self.decider.calculate_delay(classification, attempt)
                logger.debug(f"{label}: will {reason} after {delay:.2f}s")
                self.callbacks.on_retry(attempt, delay, exc, classification)
                await sleep(delay)
                attempt += 1
            else:
                self.callbacks.on_success(attempt, start_time)
                return value
