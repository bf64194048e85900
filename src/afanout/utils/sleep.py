r"""Cooperative suspension used between retry attempts."""

from __future__ import annotations

__all__ = ["sleep"]

import asyncio
import logging

logger: logging.Logger = logging.getLogger(__name__)


async def sleep(delay: float) -> None:
    """Suspend the current task for ``delay`` seconds.

    The suspension is skipped entirely when ``delay`` is zero, so an
    immediate retry does not yield to the event loop. Other tasks keep
    running while this one waits.

    Args:
        delay: The number of seconds to wait.

    Example:
        ```pycon
        >>> import asyncio
        >>> from afanout.utils.sleep import sleep
        >>> asyncio.run(sleep(0.0))

        ```
    """
    if delay <= 0:
        return
    logger.debug(f"Waiting {delay:.2f}s before retry")
    await asyncio.sleep(delay)
