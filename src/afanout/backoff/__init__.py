r"""Backoff strategies for retry delays.

This package provides the backoff strategies used by the retry decider:
exponential backoff for rate-limited failures and a constant (zero by
default) delay for transient failures.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
]

from afanout.backoff.base import BaseBackoffStrategy
from afanout.backoff.constant import ConstantBackoff
from afanout.backoff.exponential import ExponentialBackoff
