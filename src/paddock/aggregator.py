"""Season-level orchestration: fetch, extract, and fan out enrichment."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from paddock.api_logging import log_pipeline_call, set_log_dir
from paddock.assets import ImageProbe, resolve_circuit_image
from paddock.client import AsyncFeedClient
from paddock.config import PipelineSettings
from paddock.enrichment import ArticleFetcher, fetch_enrichment, fetch_team_logo
from paddock.extractors import (
    extract_constructor_standings,
    extract_drivers,
    extract_race_results,
    extract_race_schedule,
)
from paddock.models.driver import Driver
from paddock.models.enrichment import Enrichment
from paddock.models.race import Race
from paddock.models.result import RaceResults
from paddock.models.standing import ConstructorStanding
from paddock.parsing import DocumentParser, SoupDocumentParser

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def fan_out(
    items: Sequence[T],
    operation: Callable[[T], Awaitable[R]],
    fallback: Callable[[T], R],
    limit: int | None = None,
) -> list[R]:
    """Run ``operation`` on every item concurrently.

    Results come back in input order. An item whose operation raises gets
    ``fallback(item)`` instead; its siblings are unaffected. ``limit`` caps the
    number of operations in flight.
    """
    semaphore = asyncio.Semaphore(limit) if limit else None

    async def run_one(item: T) -> R:
        try:
            if semaphore is None:
                return await operation(item)
            async with semaphore:
                return await operation(item)
        except Exception as exc:
            logger.warning("Enrichment failed for %r: %s", item, exc)
            return fallback(item)

    return list(await asyncio.gather(*(run_one(item) for item in items)))


class SeasonPipeline:
    """Produces enriched drivers, races, results and standings for a season.

    Usage:
        async with AsyncFeedClient() as feed, ArticleClient() as articles, \\
                ImageProber() as prober:
            pipeline = SeasonPipeline(feed, articles, prober.probe_image)
            drivers = await pipeline.enriched_drivers(2024)
    """

    def __init__(
        self,
        feed: AsyncFeedClient,
        articles: ArticleFetcher,
        probe: ImageProbe,
        *,
        parser: DocumentParser | None = None,
        settings: PipelineSettings | None = None,
    ) -> None:
        settings = settings or PipelineSettings()
        self._feed = feed
        self._articles = articles
        self._probe = probe
        self._parser = parser or SoupDocumentParser()
        self._season = settings.season
        self._limit = settings.max_concurrency
        self._article_base_url = settings.article_base_url
        if settings.log_dir is not None:
            set_log_dir(settings.log_dir)

    # ── Single-entity accessors ────────────────────────────────

    async def enrich_driver(self, driver: Driver, season: int | None = None) -> Driver:
        """Return ``driver`` with its article enrichment attached.

        ``season`` selects the season-labelled rows (``"2024 team"``); it
        defaults to the configured season.
        """
        enrichment = await fetch_enrichment(driver.url, self._articles, season or self._season)
        return driver.model_copy(update={"enrichment": enrichment})

    async def resolve_circuit_image(self, race: Race) -> Race:
        """Return ``race`` with its circuit image attached."""
        image = await resolve_circuit_image(
            race.location.country, race.location.locality, self._probe,
        )
        return race.model_copy(update={"circuit_image": image})

    async def resolve_team_logo(self, standing: ConstructorStanding) -> ConstructorStanding:
        """Return ``standing`` with the logo found in its article attached."""
        logo = await fetch_team_logo(standing.url, self._articles, self._article_base_url)
        return standing.model_copy(update={"article_logo_url": logo})

    # ── Collections ────────────────────────────────────────────

    @log_pipeline_call
    async def drivers(self, season: int | str) -> list[Driver]:
        """Drivers of a season, without enrichment."""
        raw = await self._feed.fetch_drivers(season)
        return extract_drivers(self._parser.parse(raw))

    @log_pipeline_call
    async def enriched_drivers(self, season: int | str) -> list[Driver]:
        """Drivers of a season, each with an enrichment (default on failure)."""
        drivers = await self.drivers(season)
        label_season = int(season) if str(season).isdigit() else self._season
        return await fan_out(
            drivers,
            lambda d: self.enrich_driver(d, label_season),
            lambda d: d.model_copy(update={"enrichment": Enrichment.default()}),
            self._limit,
        )

    @log_pipeline_call
    async def race_schedule(self, season: int | str, resolve_images: bool = True) -> list[Race]:
        """The season calendar, optionally with circuit images resolved."""
        raw = await self._feed.fetch_race_schedule(season)
        races = extract_race_schedule(self._parser.parse(raw))
        if not resolve_images:
            return races
        return await fan_out(races, self.resolve_circuit_image, lambda r: r, self._limit)

    @log_pipeline_call
    async def race_results(
        self, season: int | str, round: int | str, resolve_image: bool = True,
    ) -> RaceResults:
        """The classification of one race, optionally with its circuit image."""
        raw = await self._feed.fetch_race_results(season, round)
        results = extract_race_results(self._parser.parse(raw))
        if not resolve_image:
            return results
        try:
            race = await self.resolve_circuit_image(results.race)
        except Exception as exc:
            logger.warning("Circuit image lookup failed for %r: %s", results.race, exc)
            return results
        return results.model_copy(update={"race": race})

    @log_pipeline_call
    async def constructor_standings(
        self, season: int | str, round: int | str, resolve_logos: bool = False,
    ) -> list[ConstructorStanding]:
        """Constructor standings after a round, optionally with article logos."""
        raw = await self._feed.fetch_constructor_standings(season, round)
        standings = extract_constructor_standings(self._parser.parse(raw))
        if not resolve_logos:
            return standings
        return await fan_out(standings, self.resolve_team_logo, lambda s: s, self._limit)
