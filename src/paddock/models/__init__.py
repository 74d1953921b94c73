"""paddock data models."""

from paddock.models.driver import Driver
from paddock.models.enrichment import CareerHighlights, Enrichment
from paddock.models.race import Circuit, Location, Race
from paddock.models.result import (
    ConstructorSnapshot,
    FastestLap,
    RaceResult,
    RaceResults,
    StatusCategory,
    classify_status,
)
from paddock.models.standing import ConstructorStanding, FlagUrls

__all__ = [
    "CareerHighlights",
    "Circuit",
    "ConstructorSnapshot",
    "ConstructorStanding",
    "Driver",
    "Enrichment",
    "FastestLap",
    "FlagUrls",
    "Location",
    "Race",
    "RaceResult",
    "RaceResults",
    "StatusCategory",
    "classify_status",
]
