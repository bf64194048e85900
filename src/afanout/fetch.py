r"""HTTP-backed fetch operations built on httpx.

The retry executor only looks at error messages, so these helpers turn
HTTP failures into ``FetchError`` instances whose message starts with
the status code and never contain the URL, which may hold digits of its
own. A ``429`` response is then backed off exponentially
while any other failure is retried immediately.
"""

from __future__ import annotations

__all__ = ["HttpDashboardApi", "fetch_json"]

import logging
from typing import Any

import httpx

from afanout.exceptions import FetchError

logger: logging.Logger = logging.getLogger(__name__)


async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """GET a URL and decode its JSON body.

    Args:
        client: The httpx async client used to send the request.
        url: The URL to request.

    Returns:
        The decoded JSON body.

    Raises:
        FetchError: If the request fails at the transport level or the
            response status is >= 400.

    Example:
        ```pycon
        >>> import httpx
        >>> from afanout.fetch import fetch_json
        >>> async with httpx.AsyncClient() as client:  # doctest: +SKIP
        ...     data = await fetch_json(client, "https://api.example.com/profile")
        ...

        ```
    """
    try:
        response = await client.get(url)
    except httpx.RequestError as exc:
        logger.debug(f"GET request to {url} encountered {type(exc).__name__}: {exc}")
        raise FetchError(
            method="GET",
            url=url,
            message=f"GET request failed: {exc}",
            cause=exc,
        ) from exc

    if response.status_code >= 400:
        logger.debug(f"GET request to {url} failed with status {response.status_code}")
        raise FetchError(
            method="GET",
            url=url,
            message=f"{response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            response=response,
        )
    return response.json()


class HttpDashboardApi:
    """Dashboard API served over HTTP.

    Args:
        client: The httpx async client used to send requests. Its
            lifecycle is managed by the caller.
        base_url: Root URL of the dashboard API.

    Example:
        ```pycon
        >>> import httpx
        >>> from afanout import load_dashboard
        >>> from afanout.fetch import HttpDashboardApi
        >>> async with httpx.AsyncClient(timeout=10.0) as client:  # doctest: +SKIP
        ...     result = await load_dashboard(HttpDashboardApi(client, "https://api.example.com"))
        ...

        ```
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def fetch_user_profile(self) -> Any:
        return await fetch_json(self.client, f"{self.base_url}/profile")

    async def fetch_orders(self) -> Any:
        return await fetch_json(self.client, f"{self.base_url}/orders")

    async def fetch_notifications(self) -> Any:
        return await fetch_json(self.client, f"{self.base_url}/notifications")
