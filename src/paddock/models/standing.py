"""Constructor championship standing model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from paddock.constants import NOT_AVAILABLE, UNKNOWN_COUNTRY


class FlagUrls(BaseModel):
    """Flag images for a country code."""

    model_config = ConfigDict(frozen=True)

    flat: str
    shiny: str


class ConstructorStanding(BaseModel):
    """Team championship standing entry."""

    model_config = ConfigDict(frozen=True)

    team_name: str = NOT_AVAILABLE
    nationality: str = NOT_AVAILABLE
    country_code: str = UNKNOWN_COUNTRY
    points: float = 0
    wins: int = 0
    position: int = 0
    position_text: str = NOT_AVAILABLE
    constructor_id: str = NOT_AVAILABLE
    url: str = NOT_AVAILABLE
    logo_url: str | None = None
    flag_urls: FlagUrls | None = None
    article_logo_url: str | None = None
