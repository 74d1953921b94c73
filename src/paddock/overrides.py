"""Literal corrections for known upstream data quirks.

Every special case the extractors and asset lookups apply lives in
``OVERRIDES``, keyed by kind and then by the raw upstream value. Nothing
outside this module hard-codes a surname, constructor id or country alias.
"""

from __future__ import annotations

from enum import Enum

from paddock.constants import DRIVER_IMAGE_URL_NO_DAM


class OverrideKind(str, Enum):
    """What an override entry replaces."""

    DRIVER_NUMBER = "driver_number"  # keyed by family name
    DRIVER_IMAGE_TEMPLATE = "driver_image_template"  # keyed by family name
    CONSTRUCTOR_ID = "constructor_id"  # keyed by raw constructor id
    ASSET_COUNTRY = "asset_country"  # keyed by raw country, asset lookup only


OVERRIDES: dict[OverrideKind, dict[str, str]] = {
    # The reigning champion races with #1 instead of his permanent number
    OverrideKind.DRIVER_NUMBER: {
        "Verstappen": "1",
    },
    OverrideKind.DRIVER_IMAGE_TEMPLATE: {
        "Doohan": DRIVER_IMAGE_URL_NO_DAM,
    },
    # Current-season assets are published under the sponsor name
    OverrideKind.CONSTRUCTOR_ID: {
        "sauber": "kick_sauber",
    },
    OverrideKind.ASSET_COUNTRY: {
        "UK": "great britain",
    },
}


def lookup(kind: OverrideKind, key: str | None) -> str | None:
    """Return the override registered for ``key``, or None."""
    if key is None:
        return None
    return OVERRIDES[kind].get(key)


def apply(kind: OverrideKind, key: str) -> str:
    """Return the override for ``key`` if one exists, else ``key`` unchanged."""
    replacement = lookup(kind, key)
    return key if replacement is None else replacement
