"""Free-text nationality to ISO 3166-1 alpha-2 country code."""

from __future__ import annotations

import logging
import unicodedata

from paddock.constants import UNKNOWN_COUNTRY

logger = logging.getLogger(__name__)

# Insertion order matters: partial matching returns the first hit.
NATIONALITY_CODES: dict[str, str] = {
    # Europe
    "British": "GB",
    "Finnish": "FI",
    "German": "DE",
    "Dutch": "NL",
    "Spanish": "ES",
    "French": "FR",
    "Italian": "IT",
    "Danish": "DK",
    "Swiss": "CH",
    "Swedish": "SE",
    "Belgian": "BE",
    "Austrian": "AT",
    "Portuguese": "PT",
    "Polish": "PL",
    "Russian": "RU",
    "Croatian": "HR",
    "Czech": "CZ",
    "Greek": "GR",
    "Irish": "IE",
    "Hungarian": "HU",
    "East German": "DE",
    # North America
    "American": "US",
    "Canadian": "CA",
    "Mexican": "MX",
    # South America
    "Brazilian": "BR",
    "Argentinian": "AR",
    "Argentine": "AR",
    "Colombian": "CO",
    "Venezuelan": "VE",
    "Chilean": "CL",
    "Uruguayan": "UY",
    # Asia
    "Japanese": "JP",
    "Chinese": "CN",
    "Thai": "TH",
    "Malaysian": "MY",
    "Indian": "IN",
    "Korean": "KR",
    "Vietnamese": "VN",
    "Singaporean": "SG",
    "Indonesian": "ID",
    # Oceania
    "Australian": "AU",
    "New Zealander": "NZ",
    # Middle East
    "Saudi Arabian": "SA",
    "Emirati": "AE",
    "Bahraini": "BH",
    "Qatari": "QA",
    # Africa
    "South African": "ZA",
    "Moroccan": "MA",
    "Egyptian": "EG",
    "Rhodesian": "ZW",
    # Motorsport specific spellings
    "Monégasque": "MC",
    "Monegasque": "MC",
    "Monacoan": "MC",
    "Liechtensteiner": "LI",
    "Slovenian": "SI",
}

_CASEFOLDED_CODES: dict[str, str] = {
    key.casefold(): code for key, code in NATIONALITY_CODES.items()
}


def normalize_nationality(nationality: str) -> str:
    """Strip diacritics, capitalize the first letter and trim whitespace."""
    decomposed = unicodedata.normalize("NFD", nationality)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    stripped = stripped.strip()
    return stripped[:1].upper() + stripped[1:]


def country_code(nationality: str | None) -> str:
    """Resolve a nationality string to a two-letter country code.

    Falls back to a substring match against the known demonyms and finally to
    ``"UN"``. Both fallbacks emit a warning. Never raises.
    """
    if not nationality or not nationality.strip():
        return UNKNOWN_COUNTRY

    normalized = normalize_nationality(nationality)
    folded = normalized.casefold()
    code = _CASEFOLDED_CODES.get(folded)
    if code is not None:
        return code

    for key, value in _CASEFOLDED_CODES.items():
        if key in folded or folded in key:
            logger.warning("Partial nationality match: %s -> %s", nationality, key)
            return value

    logger.warning("Unknown nationality: %s. Using %r", nationality, UNKNOWN_COUNTRY)
    return UNKNOWN_COUNTRY
