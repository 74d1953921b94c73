"""Circuit image lookup through an ordered cascade of existence probes."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from paddock import overrides
from paddock.constants import CIRCUIT_IMAGE_URL
from paddock.overrides import OverrideKind

logger = logging.getLogger(__name__)

ImageProbe = Callable[[str], Awaitable[bool]]


def circuit_image_candidates(country: str, locality: str) -> list[str]:
    """Return the candidate image URLs in probing order.

    Upstream header images are named inconsistently, so each place is tried
    with spaces turned into underscores first and underscores turned into
    spaces second; the country before the locality.
    """
    country = overrides.apply(OverrideKind.ASSET_COUNTRY, country)
    return [
        CIRCUIT_IMAGE_URL.format(place=country.replace(" ", "_")),
        CIRCUIT_IMAGE_URL.format(place=country.replace("_", " ")),
        CIRCUIT_IMAGE_URL.format(place=locality.replace(" ", "_")),
        CIRCUIT_IMAGE_URL.format(place=locality.replace("_", " ")),
    ]


async def resolve_circuit_image(country: str, locality: str, probe: ImageProbe) -> str:
    """Return the first candidate URL the probe accepts.

    Probes run one after another and stop at the first success; a probe that
    raises counts as a miss. When every candidate fails the last one is
    returned unverified, so the result is never None.
    """
    candidates = circuit_image_candidates(country, locality)
    for url in candidates:
        try:
            found = await probe(url)
        except Exception as exc:
            logger.debug("Image probe raised for %s: %s", url, exc)
            found = False
        if found:
            logger.debug("Found circuit image for %s / %s: %s", country, locality, url)
            return url

    logger.warning("No valid image found for %s and %s", country, locality)
    return candidates[-1]
