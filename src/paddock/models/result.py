"""Race result models."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from paddock.constants import NOT_AVAILABLE
from paddock.formatters import format_driver_name
from paddock.models.driver import Driver
from paddock.models.race import Race

_LAPPED_RE = re.compile(r"^\+\d+ Laps?$")


class StatusCategory(str, Enum):
    """Coarse grouping of the upstream finishing status."""

    FINISHED = "finished"
    LAPPED = "lapped"
    RETIRED = "retired"
    DISQUALIFIED = "disqualified"
    NOT_STARTED = "not_started"
    NOT_CLASSIFIED = "not_classified"
    UNKNOWN = "unknown"


def classify_status(status: str, position_text: str = NOT_AVAILABLE) -> StatusCategory:
    """Map a status string and position token to a :class:`StatusCategory`."""
    if status == "Finished":
        return StatusCategory.FINISHED
    if _LAPPED_RE.match(status):
        return StatusCategory.LAPPED
    if position_text == "D" or status == "Disqualified":
        return StatusCategory.DISQUALIFIED
    if position_text == "W" or status in ("Did not start", "Withdrew", "Did not qualify"):
        return StatusCategory.NOT_STARTED
    if position_text == "N":
        return StatusCategory.NOT_CLASSIFIED
    if status == NOT_AVAILABLE and position_text == NOT_AVAILABLE:
        return StatusCategory.UNKNOWN
    return StatusCategory.RETIRED


class ConstructorSnapshot(BaseModel):
    """Constructor as listed on a single result row."""

    model_config = ConfigDict(frozen=True)

    constructor_id: str = NOT_AVAILABLE
    name: str = NOT_AVAILABLE
    nationality: str = NOT_AVAILABLE
    url: str = NOT_AVAILABLE


class FastestLap(BaseModel):
    """Fastest lap set by a driver during the race."""

    model_config = ConfigDict(frozen=True)

    rank: str = NOT_AVAILABLE
    lap: str = NOT_AVAILABLE
    time: str = NOT_AVAILABLE
    average_speed: str = NOT_AVAILABLE
    speed_units: str = NOT_AVAILABLE


class RaceResult(BaseModel):
    """One classified (or unclassified) entry of a race."""

    model_config = ConfigDict(frozen=True)

    number: str = NOT_AVAILABLE
    position: int | None = None
    position_text: str = NOT_AVAILABLE
    points: float = 0
    grid: str = NOT_AVAILABLE
    laps: str = NOT_AVAILABLE
    status: str = NOT_AVAILABLE
    status_id: str = NOT_AVAILABLE
    race_time_millis: int | None = None
    race_time_text: str = NOT_AVAILABLE
    driver: Driver = Driver()
    constructor: ConstructorSnapshot = ConstructorSnapshot()
    fastest_lap: FastestLap | None = None

    @property
    def driver_name(self) -> str:
        return format_driver_name(self.driver.given_name, self.driver.family_name)

    @property
    def team(self) -> str:
        return self.constructor.name

    @property
    def status_category(self) -> StatusCategory:
        return classify_status(self.status, self.position_text)


class RaceResults(BaseModel):
    """A race and its result rows."""

    model_config = ConfigDict(frozen=True)

    race: Race
    results: list[RaceResult]
