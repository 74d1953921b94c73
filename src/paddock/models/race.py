"""Race schedule models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from paddock.constants import NOT_AVAILABLE


class Circuit(BaseModel):
    """Circuit descriptor."""

    model_config = ConfigDict(frozen=True)

    circuit_id: str = NOT_AVAILABLE
    circuit_ref: str = NOT_AVAILABLE
    name: str = NOT_AVAILABLE
    url: str = NOT_AVAILABLE


class Location(BaseModel):
    """Where a circuit is. ``country`` keeps the raw upstream value."""

    model_config = ConfigDict(frozen=True)

    locality: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    latitude: str = NOT_AVAILABLE
    longitude: str = NOT_AVAILABLE


class Race(BaseModel):
    """A race weekend from the season schedule."""

    model_config = ConfigDict(frozen=True)

    season: str = NOT_AVAILABLE
    round: int
    race_name: str = NOT_AVAILABLE
    date: str = NOT_AVAILABLE
    time: str = NOT_AVAILABLE
    circuit: Circuit = Circuit()
    location: Location = Location()
    url: str = NOT_AVAILABLE
    circuit_image: str | None = None
