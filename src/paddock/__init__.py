"""paddock: normalization and enrichment pipeline for motorsport feeds."""

from paddock.aggregator import SeasonPipeline, fan_out
from paddock.assets import circuit_image_candidates, resolve_circuit_image
from paddock.client import ArticleClient, AsyncFeedClient, ImageProber
from paddock.config import PipelineSettings
from paddock.enrichment import fetch_enrichment, fetch_team_logo
from paddock.exceptions import (
    FeedAPIError,
    FeedConnectionError,
    FeedParseError,
    FeedTimeoutError,
    PaddockError,
    StructuralAbsenceError,
)
from paddock.nationality import country_code
from paddock.parsing import parse_document

__all__ = [
    "ArticleClient",
    "AsyncFeedClient",
    "FeedAPIError",
    "FeedConnectionError",
    "FeedParseError",
    "FeedTimeoutError",
    "ImageProber",
    "PaddockError",
    "PipelineSettings",
    "SeasonPipeline",
    "StructuralAbsenceError",
    "circuit_image_candidates",
    "country_code",
    "fan_out",
    "fetch_enrichment",
    "fetch_team_logo",
    "parse_document",
    "resolve_circuit_image",
]

__version__ = "0.1.0"
