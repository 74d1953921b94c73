"""Turn parsed feed documents into typed entities.

Missing child fields never raise: each one degrades to its documented fallback.
Only a document without any of the expected root elements is an error.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from paddock import overrides
from paddock.constants import (
    DRIVER_IMAGE_URL,
    FLAG_URL,
    HELMET_IMAGE_URL,
    NOT_AVAILABLE,
    NUMBER_IMAGE_URL,
    PROFILE_IMAGE_URL,
    SHINY_FLAG_URL,
    TEAM_LOGO_URL,
)
from paddock.exceptions import StructuralAbsenceError
from paddock.models.driver import Driver
from paddock.models.race import Circuit, Location, Race
from paddock.models.result import ConstructorSnapshot, FastestLap, RaceResult, RaceResults
from paddock.models.standing import ConstructorStanding, FlagUrls
from paddock.nationality import country_code
from paddock.overrides import OverrideKind
from paddock.parsing import FeedNode

logger = logging.getLogger(__name__)


# ── Field access helpers ─────────────────────────────────────────────────────


def _node(node: FeedNode | None, *path: str) -> FeedNode | None:
    for tag in path:
        if node is None:
            return None
        node = node.child(tag)
    return node


def _text(node: FeedNode | None, *path: str, default: str = NOT_AVAILABLE) -> str:
    target = _node(node, *path)
    if target is None:
        return default
    return target.text or default


def _attr(node: FeedNode | None, name: str, default: str = NOT_AVAILABLE) -> str:
    if node is None:
        return default
    return node.attr(name) or default


def _to_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _to_float(raw: str | None, default: float = 0) -> float:
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _resolve_round(raw: str | None, position: int) -> int:
    """Upstream round attribute when usable, else the 1-based feed position."""
    upstream = _to_int(raw)
    if upstream is None or upstream < 1:
        return position
    if upstream != position:
        logger.debug("Round attribute %d differs from feed position %d", upstream, position)
    return upstream


def flag_urls(code: str) -> FlagUrls:
    return FlagUrls(
        flat=FLAG_URL.format(country_code=code),
        shiny=SHINY_FLAG_URL.format(country_code=code),
    )


def team_logo_url(constructor_id: str) -> str:
    return TEAM_LOGO_URL.format(team=quote(constructor_id.replace("_", " ")))


# ── Drivers ──────────────────────────────────────────────────────────────────


def extract_driver(node: FeedNode) -> Driver:
    """Build a :class:`Driver` from a ``Driver`` element."""
    given_name = _text(node, "GivenName")
    family_name = _text(node, "FamilyName")
    nationality = _text(node, "Nationality")
    code = country_code(None if nationality == NOT_AVAILABLE else nationality)
    name_code = f"{given_name[:3]}{family_name[:3]}"

    permanent_number = overrides.lookup(OverrideKind.DRIVER_NUMBER, family_name)
    if permanent_number is None:
        permanent_number = _text(node, "PermanentNumber", default="") or None
    image_template = (
        overrides.lookup(OverrideKind.DRIVER_IMAGE_TEMPLATE, family_name) or DRIVER_IMAGE_URL
    )

    return Driver(
        driver_id=_attr(node, "driverId"),
        code=_attr(node, "code"),
        given_name=given_name,
        family_name=family_name,
        full_name=f"{given_name} {family_name}",
        nationality=nationality,
        country_code=code,
        permanent_number=permanent_number,
        date_of_birth=_text(node, "DateOfBirth"),
        url=_attr(node, "url"),
        flag_url=FLAG_URL.format(country_code=code),
        number_image_url=NUMBER_IMAGE_URL.format(name_code=name_code),
        profile_image_url=PROFILE_IMAGE_URL.format(
            initial=given_name[:1],
            name_code=name_code,
            given_name=given_name,
            family_name=family_name,
        ),
        helmet_image_url=HELMET_IMAGE_URL.format(family_name=family_name),
        image_url=image_template.format(family_name=family_name),
    )


def extract_drivers(root: FeedNode) -> list[Driver]:
    """Extract every driver in a drivers document.

    Raises:
        StructuralAbsenceError: if the document holds no ``Driver`` elements.
    """
    nodes = root.all("Driver")
    if not nodes:
        raise StructuralAbsenceError("Driver")
    return [extract_driver(node) for node in nodes]


# ── Races ────────────────────────────────────────────────────────────────────


def extract_race(node: FeedNode, position: int = 1) -> Race:
    """Build a :class:`Race` from a ``Race`` element at 1-based ``position``."""
    circuit = node.child("Circuit")
    location = _node(circuit, "Location")
    return Race(
        season=_attr(node, "season"),
        round=_resolve_round(node.attr("round"), position),
        race_name=_text(node, "RaceName"),
        date=_text(node, "Date"),
        time=_text(node, "Time"),
        circuit=Circuit(
            circuit_id=_attr(circuit, "circuitId"),
            circuit_ref=_attr(circuit, "circuitRef"),
            name=_text(circuit, "CircuitName"),
            url=_attr(circuit, "url"),
        ),
        location=Location(
            locality=_text(location, "Locality"),
            country=_text(location, "Country"),
            latitude=_attr(location, "lat"),
            longitude=_attr(location, "long"),
        ),
        url=_attr(node, "url"),
    )


def extract_race_schedule(root: FeedNode) -> list[Race]:
    """Extract the season schedule in feed order.

    Raises:
        StructuralAbsenceError: if the document holds no ``Race`` elements.
    """
    nodes = root.all("Race")
    if not nodes:
        raise StructuralAbsenceError("Race")
    return [extract_race(node, position) for position, node in enumerate(nodes, start=1)]


# ── Results ──────────────────────────────────────────────────────────────────


def _extract_constructor_snapshot(node: FeedNode | None) -> ConstructorSnapshot:
    if node is None:
        return ConstructorSnapshot()
    return ConstructorSnapshot(
        constructor_id=overrides.apply(OverrideKind.CONSTRUCTOR_ID, _attr(node, "constructorId")),
        name=_text(node, "Name"),
        nationality=_text(node, "Nationality"),
        url=_attr(node, "url"),
    )


def _extract_fastest_lap(node: FeedNode | None) -> FastestLap | None:
    if node is None:
        return None
    speed = node.child("AverageSpeed")
    return FastestLap(
        rank=_attr(node, "rank"),
        lap=_attr(node, "lap"),
        time=_text(node, "Time"),
        average_speed=_text(speed),
        speed_units=_attr(speed, "units"),
    )


def extract_result(node: FeedNode) -> RaceResult:
    """Build a :class:`RaceResult` from a ``Result`` element."""
    status = node.child("Status")
    race_time = node.child("Time")
    driver = node.child("Driver")
    return RaceResult(
        number=_attr(node, "number"),
        position=_to_int(node.attr("position")),
        position_text=_attr(node, "positionText"),
        points=_to_float(node.attr("points")),
        grid=_text(node, "Grid"),
        laps=_text(node, "Laps"),
        status=_text(status),
        status_id=_attr(status, "statusId"),
        race_time_millis=_to_int(race_time.attr("millis")) if race_time is not None else None,
        race_time_text=_text(race_time),
        driver=extract_driver(driver) if driver is not None else Driver(),
        constructor=_extract_constructor_snapshot(node.child("Constructor")),
        fastest_lap=_extract_fastest_lap(node.child("FastestLap")),
    )


def extract_race_results(root: FeedNode) -> RaceResults:
    """Extract the race and its result rows from a results document.

    Raises:
        StructuralAbsenceError: if the document holds no ``Race`` element.
    """
    race = root.first("Race")
    if race is None:
        raise StructuralAbsenceError("Race")
    return RaceResults(
        race=extract_race(race),
        results=[extract_result(node) for node in race.all("Result")],
    )


# ── Constructor standings ────────────────────────────────────────────────────


def extract_constructor_standing(node: FeedNode) -> ConstructorStanding:
    """Build a :class:`ConstructorStanding` from a ``ConstructorStanding`` element."""
    constructor = node.child("Constructor")
    nationality = _text(constructor, "Nationality")
    code = country_code(None if nationality == NOT_AVAILABLE else nationality)
    constructor_id = overrides.apply(
        OverrideKind.CONSTRUCTOR_ID, _attr(constructor, "constructorId"),
    )
    return ConstructorStanding(
        team_name=_text(constructor, "Name"),
        nationality=nationality,
        country_code=code,
        points=_to_float(node.attr("points")),
        wins=_to_int(node.attr("wins")) or 0,
        position=_to_int(node.attr("position")) or 0,
        position_text=_attr(node, "positionText"),
        constructor_id=constructor_id,
        url=_attr(constructor, "url"),
        logo_url=team_logo_url(constructor_id) if constructor_id != NOT_AVAILABLE else None,
        flag_urls=flag_urls(code),
    )


def extract_constructor_standings(root: FeedNode) -> list[ConstructorStanding]:
    """Extract every constructor standing in a standings document.

    Raises:
        StructuralAbsenceError: if the document holds no ``ConstructorStanding``.
    """
    nodes = root.all("ConstructorStanding")
    if not nodes:
        raise StructuralAbsenceError("ConstructorStanding")
    return [extract_constructor_standing(node) for node in nodes]
