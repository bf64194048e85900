r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from afanout.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every attempt. With the default delay of
    zero it describes an immediate retry, which is how transient failures
    are handled.

    Args:
        delay: The fixed delay in seconds (default: 0.0).

    Example:
        ```pycon
        >>> from afanout.backoff import ConstantBackoff
        >>> ConstantBackoff().calculate(3)
        0.0
        >>> ConstantBackoff(delay=2.5).calculate(0)
        2.5

        ```
    """

    def __init__(self, delay: float = 0.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
