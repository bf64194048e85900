r"""Parameter validation utilities for the retry policy.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before an operation is executed.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]


def validate_retry_params(max_retries: int, base_delay: float) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts for a failed
            operation. Must be >= 0. A value of 0 means no retries (only
            the initial attempt).
        base_delay: Base delay in seconds for rate-limit backoff.
            Must be >= 0.

    Raises:
        ValueError: If max_retries or base_delay are negative, or if
            max_retries is not an integer.

    Example:
        ```pycon
        >>> from afanout.core import validate_retry_params
        >>> validate_retry_params(max_retries=3, base_delay=0.1)
        >>> validate_retry_params(max_retries=0, base_delay=0.0)
        >>> validate_retry_params(max_retries=-1, base_delay=0.1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if not isinstance(max_retries, int) or isinstance(max_retries, bool):
        msg = f"max_retries must be an integer, got {max_retries!r}"
        raise ValueError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ValueError(msg)
