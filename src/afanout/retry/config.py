r"""Configuration dataclasses for retry behavior.

This module provides the retry policy and the callback configuration
consumed by the retry executor.
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "RetryPolicy"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from afanout.core.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES
from afanout.core.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from afanout.callbacks import FailureInfo, RetryInfo, SuccessInfo


@dataclass(frozen=True)
class RetryPolicy:
    """Retry policy applied to one operation.

    Args:
        max_retries: Maximum number of retry attempts. Must be >= 0.
            Total attempts = max_retries + 1.
        base_delay: Delay in seconds after the first rate-limited
            failure; doubled on every further one. Must be >= 0.

    Example:
        ```pycon
        >>> from afanout.retry import RetryPolicy
        >>> policy = RetryPolicy()
        >>> policy.max_retries, policy.base_delay
        (3, 0.1)
        >>> policy.merge(max_retries=0).max_retries
        0
        >>> policy.max_retries  # Original unchanged
        3

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay: float = DEFAULT_BASE_DELAY

    def __post_init__(self) -> None:
        validate_retry_params(max_retries=self.max_retries, base_delay=self.base_delay)

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Return a new policy with some fields replaced.

        Overrides set to ``None`` are ignored.

        Args:
            **overrides: Field values to replace.

        Returns:
            A new validated policy.

        Raises:
            ValueError: If an override fails validation.
        """
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


@dataclass
class CallbackConfig:
    """Configuration for lifecycle callbacks.

    Attributes:
        on_retry: Optional callback invoked before each retry.
        on_success: Optional callback invoked when the operation succeeds.
        on_failure: Optional callback invoked when all retries are exhausted.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[SuccessInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None
