r"""Retry decision logic for failed operations.

This module provides the RetryDecider class that decides whether a
failed attempt is retried and how long to wait before the next one.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

from typing import TYPE_CHECKING

from afanout.backoff import ConstantBackoff, ExponentialBackoff
from afanout.retry.classify import ErrorClassification, classify_error

if TYPE_CHECKING:
    from afanout.backoff import BaseBackoffStrategy


class RetryDecider:
    """Decides whether and when a failed operation is retried.

    Rate-limited failures wait ``base_delay * 2 ** attempt`` seconds.
    Transient and unclassified failures are retried immediately.

    Args:
        max_retries: Maximum number of retries.
        base_delay: Base delay in seconds for rate-limit backoff.

    Example:
        ```pycon
        >>> from afanout.retry import RetryDecider
        >>> decider = RetryDecider(max_retries=3, base_delay=0.1)
        >>> decider.should_retry(attempt=2)
        (True, 'retry 3/3')
        >>> decider.should_retry(attempt=3)
        (False, 'max retries exhausted')
        >>> decider.calculate_delay(decider.classify(RuntimeError("429")), attempt=1)
        0.2

        ```
    """

    def __init__(self, max_retries: int, base_delay: float) -> None:
        self.max_retries = max_retries
        self.strategies: dict[ErrorClassification, BaseBackoffStrategy] = {
            ErrorClassification.RATE_LIMITED: ExponentialBackoff(base_delay=base_delay),
            ErrorClassification.TRANSIENT: ConstantBackoff(),
            ErrorClassification.OTHER: ConstantBackoff(),
        }

    def classify(self, error: Exception) -> ErrorClassification:
        return classify_error(error)

    def should_retry(self, attempt: int) -> tuple[bool, str]:
        """Determine if another attempt is permitted after ``attempt``
        failed.

        Args:
            attempt: Index of the failed attempt (0-indexed).

        Returns:
            Tuple of (should_retry, reason).
        """
        if attempt >= self.max_retries:
            return (False, "max retries exhausted")
        return (True, f"retry {attempt + 1}/{self.max_retries}")

    def calculate_delay(self, classification: ErrorClassification, attempt: int) -> float:
        """Calculate the delay before the attempt following ``attempt``.

        Args:
            classification: Retry category of the failure.
            attempt: Index of the failed attempt (0-indexed).

        Returns:
            Delay in seconds. Zero means retry immediately.
        """
        return self.strategies[classification].calculate(attempt)
