r"""Callback manager for orchestrating retry lifecycle events."""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING

from afanout.callbacks import FailureInfo, RetryInfo, SuccessInfo

if TYPE_CHECKING:
    from afanout.retry.classify import ErrorClassification
    from afanout.retry.config import CallbackConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempt indices are received 0-indexed and reported 1-indexed.

    Attributes:
        callbacks: Configuration containing callback functions for lifecycle events.
        max_retries: Maximum number of retries of the executor.
    """

    def __init__(self, callbacks: CallbackConfig, max_retries: int) -> None:
        self.callbacks = callbacks
        self.max_retries = max_retries

    def on_retry(
        self,
        attempt: int,
        wait_time: float,
        error: Exception,
        classification: ErrorClassification,
    ) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: Index of the failed attempt (0-indexed).
            wait_time: Delay before the next attempt.
            error: The error of the failed attempt.
            classification: Retry category of the error.
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt=attempt + 2,
                    max_retries=self.max_retries,
                    wait_time=wait_time,
                    error=error,
                    classification=classification,
                )
            )

    def on_success(self, attempt: int, start_time: float) -> None:
        if self.callbacks.on_success:
            self.callbacks.on_success(
                SuccessInfo(
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    total_time=time.monotonic() - start_time,
                )
            )

    def on_failure(self, attempt: int, error: Exception, start_time: float) -> None:
        if self.callbacks.on_failure:
            self.callbacks.on_failure(
                FailureInfo(
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    error=error,
                    total_time=time.monotonic() - start_time,
                )
            )
