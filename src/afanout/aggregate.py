r"""Parallel aggregation of independently retried operations.

This module provides the ParallelAggregator class that launches a fixed
set of named operations concurrently, each wrapped in its own retry
executor, and combines their values into a single result.
"""

from __future__ import annotations

__all__ = ["AggregateResult", "ParallelAggregator", "load_all"]

import asyncio
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from afanout.retry import AsyncRetryExecutor
from afanout.retry.classify import error_message
from afanout.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from afanout.retry import CallbackConfig, RetryPolicy

    Operation = Callable[[], Awaitable[Any]]
    Operations = Mapping[str, Operation] | Iterable[tuple[str, Operation]]

logger: logging.Logger = logging.getLogger(__name__)


@dataclass
class AggregateResult:
    """Combined result of a fan-out where every operation succeeded.

    Attributes:
        success: Always ``True``; a failed fan-out raises instead.
        data: Value of each operation keyed by its name, in input order.
        time_taken: Wall-clock duration of the fan-out in milliseconds.
    """

    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    time_taken: float = 0.0


def _named_operations(operations: Operations) -> list[tuple[str, Operation]]:
    items = list(operations.items() if isinstance(operations, Mapping) else operations)
    seen: set[str] = set()
    for name, _ in items:
        if name in seen:
            msg = f"operation names must be unique, got duplicate {name!r}"
            raise ValueError(msg)
        seen.add(name)
    return items


class ParallelAggregator:
    """Runs named operations concurrently with independent retries.

    Every operation gets its own retry budget; a failure in one does not
    consume retries of another. All operations are started before any
    completion is observed, so the fan-out takes about as long as the
    slowest operation.

    When any operation exhausts its retries, ``load_all`` raises the
    first such error observed by ``asyncio.gather`` and discards the
    values of the others. Siblings are not cancelled: operations still
    in flight run to completion in the background.

    Args:
        policy: Retry policy applied to every operation. Defaults to
            ``RetryPolicy()``.
        callback_config: Optional lifecycle callbacks, shared by all
            operations.

    Example:
        ```pycon
        >>> import asyncio
        >>> from afanout import ParallelAggregator
        >>> async def profile() -> dict:
        ...     return {"id": "user-1"}
        ...
        >>> async def orders() -> list:
        ...     return []
        ...
        >>> result = asyncio.run(
        ...     ParallelAggregator().load_all({"profile": profile, "orders": orders})
        ... )
        >>> result.success, result.data
        (True, {'profile': {'id': 'user-1'}, 'orders': []})

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.executor = AsyncRetryExecutor(policy, callback_config)

    async def load_all(self, operations: Operations) -> AggregateResult:
        """Run all operations concurrently and combine their values.

        Args:
            operations: Named zero-argument coroutine functions, either
                as a mapping or as an iterable of ``(name, operation)``
                pairs.

        Returns:
            The combined result with one entry per operation.

        Raises:
            ValueError: If two operations share a name.
            Exception: The first terminal error of an operation.
        """
        named = _named_operations(operations)
        names = [name for name, _ in named]
        start_time = time.monotonic()
        try:
            values = await asyncio.gather(
                *(self.executor.execute(operation, name=name) for name, operation in named)
            )
        except Exception as exc:
            logger.debug(f"Fan-out of {names} failed: {error_message(exc)}")
            raise
        time_taken = (time.monotonic() - start_time) * 1000
        log_structured(
            logger,
            logging.DEBUG,
            f"Loaded {len(names)} operations in {time_taken:.0f}ms",
            slots=names,
            time_taken_ms=time_taken,
        )
        return AggregateResult(success=True, data=dict(zip(names, values)), time_taken=time_taken)


async def load_all(operations: Operations, policy: RetryPolicy | None = None) -> AggregateResult:
    """Run named operations concurrently with independent retries.

    Functional shortcut for ``ParallelAggregator(policy).load_all``.

    Args:
        operations: Named zero-argument coroutine functions.
        policy: Retry policy applied to every operation.

    Returns:
        The combined result with one entry per operation.
    """
    return await ParallelAggregator(policy).load_all(operations)
