r"""afanout - Concurrent fan-out of async operations with classified
retries.

This package launches a fixed set of independent async operations at
once, so the total latency is that of the slowest one, and makes each
operation resilient on its own:

    - Rate-limited failures (message containing "429") are retried after
      an exponential backoff (base_delay * 2 ** attempt)
    - Any other failure is retried immediately
    - The error of the last attempt is raised unchanged once the retries
      are exhausted, and fails the whole fan-out
    - Optional lifecycle callbacks and structured logging for observability

Example:
    ```pycon
    >>> import asyncio
    >>> from afanout import load_all
    >>> async def profile() -> dict:
    ...     return {"id": "user-1"}
    ...
    >>> async def orders() -> list:
    ...     return []
    ...
    >>> result = asyncio.run(load_all({"profile": profile, "orders": orders}))
    >>> result.data
    {'profile': {'id': 'user-1'}, 'orders': []}

    ```
"""

from __future__ import annotations

__all__ = [
    "AggregateResult",
    "AsyncRetryExecutor",
    "ErrorClassification",
    "FetchError",
    "ParallelAggregator",
    "RetryPolicy",
    "__version__",
    "classify_error",
    "load_all",
    "load_dashboard",
    "retry_with_backoff",
]

from importlib.metadata import PackageNotFoundError, version

from afanout.aggregate import AggregateResult, ParallelAggregator, load_all
from afanout.dashboard import load_dashboard
from afanout.exceptions import FetchError
from afanout.retry import AsyncRetryExecutor, ErrorClassification, RetryPolicy, classify_error
from afanout.retry_async import retry_with_backoff

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
