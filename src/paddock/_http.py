"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from paddock.config import DEFAULT_TIMEOUT
from paddock.exceptions import (
    FeedAPIError,
    FeedConnectionError,
    FeedTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/xml,application/json;q=0.9,text/html;q=0.8,*/*;q=0.5",
}


def _handle_response(response: httpx.Response) -> str | dict[str, Any]:
    """Validate response status and return JSON or text depending on content type."""
    if response.status_code >= 400:
        raise FeedAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    if "json" in response.headers.get("Content-Type", ""):
        return response.json()  # type: ignore[no-any-return]
    return response.text


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    Connection errors and timeouts are retried ``max_retries`` times with an
    exponential backoff starting at ``backoff`` seconds.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        *,
        user_agent: str | None = None,
        max_retries: int = 0,
        backoff: float = 0.5,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        headers = dict(DEFAULT_HEADERS)
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
        )
        self._max_retries = max_retries
        self._backoff = backoff

    async def _send(self, method: str, url: str) -> httpx.Response:
        attempt = 0
        while True:
            try:
                return await self._client.request(method, url)
            except httpx.ConnectError as exc:
                if attempt >= self._max_retries:
                    raise FeedConnectionError(str(exc)) from exc
            except httpx.TimeoutException as exc:
                if attempt >= self._max_retries:
                    raise FeedTimeoutError(str(exc)) from exc
            delay = self._backoff * (2 ** attempt)
            attempt += 1
            logger.debug("Retrying %s %s in %.2fs (attempt %d)", method, url, delay, attempt)
            await asyncio.sleep(delay)

    async def get(self, endpoint: str) -> str | dict[str, Any]:
        """Perform an async GET request and return parsed JSON or raw text."""
        response = await self._send("GET", endpoint)
        return _handle_response(response)

    async def get_response(self, url: str) -> httpx.Response:
        """GET without status handling, for callers that inspect the response."""
        return await self._send("GET", url)

    async def head(self, url: str) -> httpx.Response:
        return await self._send("HEAD", url)

    async def close(self) -> None:
        await self._client.aclose()
