r"""Dashboard loading: three named fetches fanned out in parallel."""

from __future__ import annotations

__all__ = ["DashboardApi", "load_dashboard"]

import logging
from typing import TYPE_CHECKING, Any, Protocol

from afanout.aggregate import load_all
from afanout.retry.classify import error_message
from afanout.utils.structured_logging import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from afanout.aggregate import AggregateResult
    from afanout.retry import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class DashboardApi(Protocol):
    """Source of the three dashboard sections."""

    async def fetch_user_profile(self) -> Any: ...

    async def fetch_orders(self) -> Any: ...

    async def fetch_notifications(self) -> Any: ...


async def load_dashboard(
    api: DashboardApi,
    policy: RetryPolicy | None = None,
    correlation_id: str | None = None,
) -> AggregateResult:
    """Load the profile, orders and notifications of a dashboard
    concurrently.

    Each fetch is retried independently. If any of them exhausts its
    retries the whole load fails with that error.

    Args:
        api: The API to fetch the dashboard sections from.
        policy: Retry policy applied to each fetch.
        correlation_id: Optional id attached to every log record emitted
            during the load (see ``StructuredFormatter``). The previous
            correlation id is restored afterwards.

    Returns:
        The combined result, with ``data`` keyed by ``"profile"``,
        ``"orders"`` and ``"notifications"``.

    Raises:
        Exception: The terminal error of the first fetch observed to fail.
    """
    previous_id = get_correlation_id()
    if correlation_id is not None:
        set_correlation_id(correlation_id)
    logger.info("Starting dashboard load")
    try:
        return await load_all(
            {
                "profile": api.fetch_user_profile,
                "orders": api.fetch_orders,
                "notifications": api.fetch_notifications,
            },
            policy,
        )
    except Exception as exc:
        logger.error(f"Dashboard crashed: {error_message(exc)}")
        raise
    finally:
        if previous_id is None:
            clear_correlation_id()
        else:
            set_correlation_id(previous_id)
