r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed operation based on the index of the attempt that just failed.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay after a failed attempt.

        Args:
            attempt: The index of the failed attempt (0-indexed). For
                example, attempt=0 is the initial call, attempt=1 is the
                first retry, etc.

        Returns:
            The delay in seconds before the next attempt.
        """
