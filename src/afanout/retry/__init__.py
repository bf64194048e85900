r"""Retry package implementing the classified retry executor.

Public API:
    - RetryPolicy: Maximum retries and base delay of one operation
    - CallbackConfig: Configuration for callbacks
    - ErrorClassification / classify_error: Retry category of a failure
    - RetryDecider: Logic for deciding whether and when to retry
    - CallbackManager: Manager for callback invocations
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "ErrorClassification",
    "RetryDecider",
    "RetryPolicy",
    "classify_error",
]

from afanout.retry.classify import ErrorClassification, classify_error
from afanout.retry.config import CallbackConfig, RetryPolicy
from afanout.retry.decider import RetryDecider
from afanout.retry.executor_async import AsyncRetryExecutor
from afanout.retry.manager import CallbackManager
