r"""Utilities for suspension between retries and structured logging."""

from __future__ import annotations

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

from afanout.utils.structured_logging import (
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
