"""Supplementary attributes scraped from an encyclopedia article."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from paddock.constants import NOT_AVAILABLE


class CareerHighlights(BaseModel):
    """Career statistics from an article's info table."""

    model_config = ConfigDict(frozen=True)

    championships: int = 0
    entries: int = 0
    wins: int = 0
    podiums: int = 0
    career_points: float = 0
    pole_positions: int = 0
    fastest_laps: int = 0
    first_entry: str = NOT_AVAILABLE
    last_entry: str = NOT_AVAILABLE
    first_win: str = NOT_AVAILABLE
    last_win: str = NOT_AVAILABLE
    last_position: str = NOT_AVAILABLE


class Enrichment(BaseModel):
    """Physical details, team history and career highlights for a driver."""

    model_config = ConfigDict(frozen=True)

    height: str = NOT_AVAILABLE
    weight: str = NOT_AVAILABLE
    team_history: list[str] = Field(default_factory=list)
    current_team: str = NOT_AVAILABLE
    career: CareerHighlights = Field(default_factory=CareerHighlights)

    @classmethod
    def default(cls) -> Enrichment:
        """Fully defaulted enrichment used when an article is unavailable."""
        return cls()

    @property
    def is_default(self) -> bool:
        return self == Enrichment()
