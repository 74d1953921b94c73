"""Driver model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from paddock.constants import NOT_AVAILABLE, UNKNOWN_COUNTRY
from paddock.models.enrichment import Enrichment


class Driver(BaseModel):
    """A driver with normalized nationality and derived asset URLs."""

    model_config = ConfigDict(frozen=True)

    driver_id: str = NOT_AVAILABLE
    code: str = NOT_AVAILABLE
    given_name: str = NOT_AVAILABLE
    family_name: str = NOT_AVAILABLE
    full_name: str = NOT_AVAILABLE
    nationality: str = NOT_AVAILABLE
    country_code: str = UNKNOWN_COUNTRY
    permanent_number: str | None = None
    date_of_birth: str = NOT_AVAILABLE
    url: str = NOT_AVAILABLE
    flag_url: str | None = None
    number_image_url: str | None = None
    profile_image_url: str | None = None
    helmet_image_url: str | None = None
    image_url: str | None = None
    enrichment: Enrichment | None = None

    @property
    def name_code(self) -> str:
        """First three letters of the given name followed by the family name's."""
        return f"{self.given_name[:3]}{self.family_name[:3]}"
