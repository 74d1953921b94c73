"""Clients for the upstream feed, the article host and image probing."""

from __future__ import annotations

import io
import logging
from collections.abc import MutableMapping

import httpx
from PIL import Image, UnidentifiedImageError

from paddock._http import AsyncTransport
from paddock.api_logging import log_feed_call
from paddock.config import PipelineSettings
from paddock.exceptions import FeedParseError, PaddockError
from paddock.parsing import RawDocument

logger = logging.getLogger(__name__)


class AsyncFeedClient:
    """Asynchronous client for an Ergast-compatible motorsport feed.

    Returns raw documents: text for markup responses, dicts for JSON ones.

    Usage:
        async with AsyncFeedClient() as feed:
            raw = await feed.fetch_drivers(2024)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        settings: PipelineSettings | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        settings = settings or PipelineSettings()
        self._transport = transport or AsyncTransport(
            base_url=base_url or settings.feed_base_url,
            timeout=timeout or settings.http_timeout_seconds,
            user_agent=settings.user_agent,
            max_retries=settings.max_retries,
            backoff=settings.retry_backoff_seconds,
        )

    async def __aenter__(self) -> AsyncFeedClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    @log_feed_call
    async def fetch_drivers(self, season: int | str) -> RawDocument:
        """Get the drivers entered in a season."""
        return await self._transport.get(f"/{season}/drivers/")

    @log_feed_call
    async def fetch_race_schedule(self, season: int | str) -> RawDocument:
        """Get the race calendar of a season."""
        return await self._transport.get(f"/{season}/")

    @log_feed_call
    async def fetch_race_results(self, season: int | str, round: int | str) -> RawDocument:
        """Get the classification of one race."""
        return await self._transport.get(f"/{season}/{round}/results/")

    @log_feed_call
    async def fetch_constructor_standings(
        self, season: int | str, round: int | str,
    ) -> RawDocument:
        """Get the constructor championship after a round."""
        return await self._transport.get(f"/{season}/{round}/constructorStandings/")


class ArticleClient:
    """Fetches encyclopedia articles by their ``/wiki/`` path segment.

    ``base_url`` is either the encyclopedia host or a same-origin proxy that
    forwards ``/wiki/...`` to it. Pass a mapping as ``cache`` to keep fetched
    articles across calls.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        settings: PipelineSettings | None = None,
        transport: AsyncTransport | None = None,
        cache: MutableMapping[str, str] | None = None,
    ) -> None:
        settings = settings or PipelineSettings()
        self._transport = transport or AsyncTransport(
            base_url=base_url or settings.article_base_url,
            timeout=timeout or settings.http_timeout_seconds,
            user_agent=settings.user_agent,
            max_retries=settings.max_retries,
            backoff=settings.retry_backoff_seconds,
        )
        self._cache = cache

    async def __aenter__(self) -> ArticleClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    @log_feed_call
    async def fetch_article(self, path_segment: str) -> str:
        """Return the HTML of the article at ``/wiki/<path_segment>``."""
        if self._cache is not None and path_segment in self._cache:
            return self._cache[path_segment]
        document = await self._transport.get(f"/wiki/{path_segment}")
        if not isinstance(document, str):
            raise FeedParseError(f"Article {path_segment!r} is not an HTML document")
        if self._cache is not None:
            self._cache[path_segment] = document
        return document


def _decodes(content: bytes) -> bool:
    """Return True if Pillow can identify and verify ``content``."""
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return False
    return True


class ImageProber:
    """Checks that a URL serves an image.

    A HEAD request must answer with an ``image/*`` content type. When
    ``verify_decode`` is on, raster images are then downloaded and decoded;
    SVG is accepted on its content type alone.
    """

    def __init__(
        self,
        timeout: float | None = None,
        *,
        settings: PipelineSettings | None = None,
        verify_decode: bool | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        settings = settings or PipelineSettings()
        self._transport = transport or AsyncTransport(
            timeout=timeout or settings.http_timeout_seconds,
            user_agent=settings.user_agent,
        )
        self._verify_decode = (
            settings.verify_image_decode if verify_decode is None else verify_decode
        )

    async def __aenter__(self) -> ImageProber:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._transport.close()

    async def probe_image(self, url: str) -> bool:
        """Return True if ``url`` exists and serves an image. Never raises."""
        try:
            head = await self._transport.head(url)
        except (PaddockError, httpx.HTTPError) as exc:
            logger.debug("Image probe failed for %s: %s", url, exc)
            return False

        content_type = head.headers.get("Content-Type", "")
        if head.status_code >= 400 or not content_type.startswith("image/"):
            return False
        if not self._verify_decode or content_type.startswith("image/svg"):
            return True

        try:
            response = await self._transport.get_response(url)
        except (PaddockError, httpx.HTTPError) as exc:
            logger.debug("Image download failed for %s: %s", url, exc)
            return False
        if response.status_code >= 400:
            return False
        return _decodes(response.content)
