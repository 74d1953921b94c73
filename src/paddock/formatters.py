"""Formatting and validation helpers for display-ready values."""

from __future__ import annotations

from datetime import date

from paddock.constants import NOT_AVAILABLE

_KPH_TO_MPH = 0.621371


def format_lap_time(millis: int | None) -> str:
    """Format milliseconds as m:ss.fff or 'N/A' if missing."""
    if not millis:
        return NOT_AVAILABLE
    mins, secs = divmod(millis / 1000, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_driver_name(given_name: str, family_name: str) -> str:
    """Format a driver name as 'Family, Given'."""
    return f"{family_name}, {given_name}"


def kph_to_mph(kph: float) -> float:
    return round(kph * _KPH_TO_MPH, 2)


def format_points_difference(first: float, second: float) -> str:
    """Format the absolute gap between two point totals as '+n' or '0'."""
    diff = abs(first - second)
    if diff == 0:
        return "0"
    return f"+{diff:g}"


def is_valid_driver_number(number: int) -> bool:
    return 0 < number <= 99


def is_valid_race_date(value: str) -> bool:
    """Return True if ``value`` is an ISO 8601 calendar date."""
    try:
        date.fromisoformat(value)
    except (TypeError, ValueError):
        return False
    return True
