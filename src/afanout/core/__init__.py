r"""Defaults and parameter validation shared by the retry executor and
the parallel aggregator."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_RETRIES",
    "RATE_LIMIT_TOKEN",
    "validate_retry_params",
]

from afanout.core.config import DEFAULT_BASE_DELAY, DEFAULT_MAX_RETRIES, RATE_LIMIT_TOKEN
from afanout.core.validation import validate_retry_params
