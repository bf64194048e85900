r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from afanout.backoff.base import BaseBackoffStrategy
from afanout.core.config import DEFAULT_BASE_DELAY


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt).

    This is the strategy applied to rate-limited failures, so that a
    dependency answering ``429`` gets progressively more room to recover.

    Args:
        base_delay: The delay in seconds after the first failed attempt
            (default: 0.1). The actual delay is calculated as
            base_delay * (2 ** attempt).

    Example:
        ```pycon
        >>> from afanout.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.1)
        >>> backoff.calculate(0)
        0.1
        >>> backoff.calculate(1)
        0.2
        >>> backoff.calculate(2)
        0.4

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_BASE_DELAY) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The index of the failed attempt (0-indexed).

        Returns:
            The calculated delay: base_delay * (2 ** attempt).
        """
        return self.base_delay * (2**attempt)
