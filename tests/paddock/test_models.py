"""Tests for the entity models."""

from __future__ import annotations

import pytest

from paddock.models import (
    CareerHighlights,
    ConstructorStanding,
    Driver,
    Enrichment,
    Race,
    RaceResult,
    StatusCategory,
    classify_status,
)


class TestDriverModel:
    def test_defaults(self) -> None:
        driver = Driver()
        assert driver.given_name == "N/A"
        assert driver.country_code == "UN"
        assert driver.permanent_number is None
        assert driver.enrichment is None

    def test_frozen(self) -> None:
        driver = Driver(given_name="Max", family_name="Verstappen")
        with pytest.raises(Exception):
            driver.given_name = "Jos"  # type: ignore[misc]

    def test_name_code(self) -> None:
        assert Driver(given_name="Oscar", family_name="Piastri").name_code == "OscPia"

    def test_model_copy_attaches_enrichment(self) -> None:
        driver = Driver(given_name="Max")
        enriched = driver.model_copy(update={"enrichment": Enrichment.default()})
        assert driver.enrichment is None
        assert enriched.enrichment is not None
        assert enriched.given_name == "Max"


class TestEnrichmentModel:
    def test_default_is_fully_populated(self) -> None:
        enrichment = Enrichment.default()
        assert enrichment.height == "N/A"
        assert enrichment.weight == "N/A"
        assert enrichment.current_team == "N/A"
        assert enrichment.team_history == []
        assert enrichment.career == CareerHighlights()
        assert enrichment.career.career_points == 0
        assert enrichment.career.first_win == "N/A"
        assert enrichment.is_default

    def test_not_default(self) -> None:
        assert not Enrichment(height="1.81 m").is_default


class TestRaceModel:
    def test_round_required(self) -> None:
        with pytest.raises(Exception):
            Race()  # type: ignore[call-arg]

    def test_defaults(self) -> None:
        race = Race(round=3)
        assert race.race_name == "N/A"
        assert race.circuit.name == "N/A"
        assert race.location.country == "N/A"
        assert race.circuit_image is None


class TestStandingModel:
    def test_defaults(self) -> None:
        standing = ConstructorStanding()
        assert standing.points == 0
        assert standing.wins == 0
        assert standing.logo_url is None
        assert standing.article_logo_url is None


class TestRaceResultModel:
    def test_derived_properties(self) -> None:
        result = RaceResult(
            driver=Driver(given_name="Lando", family_name="Norris"),
            status="Finished",
            position=1,
            position_text="1",
        )
        assert result.driver_name == "Norris, Lando"
        assert result.team == "N/A"
        assert result.status_category is StatusCategory.FINISHED


class TestClassifyStatus:
    @pytest.mark.parametrize(
        ("status", "position_text", "expected"),
        [
            ("Finished", "1", StatusCategory.FINISHED),
            ("+1 Lap", "15", StatusCategory.LAPPED),
            ("+3 Laps", "18", StatusCategory.LAPPED),
            ("Disqualified", "D", StatusCategory.DISQUALIFIED),
            ("Underweight", "D", StatusCategory.DISQUALIFIED),
            ("Did not start", "W", StatusCategory.NOT_STARTED),
            ("Withdrew", "W", StatusCategory.NOT_STARTED),
            ("Engine", "N", StatusCategory.NOT_CLASSIFIED),
            ("Collision damage", "R", StatusCategory.RETIRED),
            ("Gearbox", "R", StatusCategory.RETIRED),
            ("N/A", "N/A", StatusCategory.UNKNOWN),
        ],
    )
    def test_classify(self, status, position_text, expected) -> None:
        assert classify_status(status, position_text) is expected
