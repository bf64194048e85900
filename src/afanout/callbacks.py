r"""Callback data structures for observability.

The retry executor exposes three lifecycle hooks, configured through
``afanout.retry.CallbackConfig``:

- on_retry: Called before each retry (before the backoff delay)
- on_success: Called when an operation succeeds
- on_failure: Called when all retries are exhausted, before the final
  error is raised

Example:
    ```pycon
    >>> from afanout import retry_with_backoff
    >>> from afanout.callbacks import RetryInfo
    >>> from afanout.retry import CallbackConfig
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Retry {info.attempt}/{info.max_retries} in {info.wait_time}s")
    ...
    >>> callbacks = CallbackConfig(on_retry=log_retry)
    >>> value = await retry_with_backoff(fetch, callbacks=callbacks)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RetryInfo", "SuccessInfo"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from afanout.retry.classify import ErrorClassification


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt: The number of the upcoming attempt (1-indexed). The first
            retry is attempt 2.
        max_retries: Maximum number of retry attempts configured.
        wait_time: The delay in seconds before this retry.
        error: The exception that triggered the retry.
        classification: The retry category of that exception.
    """

    attempt: int
    max_retries: int
    wait_time: float
    error: Exception
    classification: ErrorClassification


@dataclass
class SuccessInfo:
    """Information passed to on_success callback.

    Attributes:
        attempt: The attempt number that succeeded (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempt: int
    max_retries: int
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt: The final attempt number (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        error: The error of the final attempt, which is raised next.
        total_time: Total time spent on all attempts including backoff (seconds).
    """

    attempt: int
    max_retries: int
    error: Exception
    total_time: float
