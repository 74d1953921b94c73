"""Pipeline configuration read from the environment."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FEED_BASE_URL = "https://api.jolpi.ca/ergast/f1"
DEFAULT_ARTICLE_BASE_URL = "https://en.wikipedia.org"
DEFAULT_TIMEOUT = 30.0


class PipelineSettings(BaseSettings):
    """Settings shared by the feed, article and image clients.

    Every value can be overridden with a ``PADDOCK_`` prefixed environment
    variable or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PADDOCK_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    feed_base_url: str = Field(
        default=DEFAULT_FEED_BASE_URL,
        min_length=8,
        description="Base URL of the Ergast-compatible feed.",
    )
    article_base_url: str = Field(
        default=DEFAULT_ARTICLE_BASE_URL,
        min_length=8,
        description="Host (or same-origin proxy) serving encyclopedia articles.",
    )
    http_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = Field(
        default="paddock/0.1",
        min_length=1,
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Retries on connection errors and timeouts before giving up.",
    )
    retry_backoff_seconds: float = Field(default=0.5, ge=0)
    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on in-flight enrichment operations (None = unbounded).",
    )
    verify_image_decode: bool = Field(
        default=True,
        description="Download and decode probed images after the HEAD check.",
    )
    season: int = Field(
        default=2024,
        ge=1950,
        description="Season used for season-labelled infobox rows such as '2024 team'.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for the call log file (defaults to ./logs).",
    )
