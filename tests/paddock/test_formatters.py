"""Tests for formatters.py."""

from __future__ import annotations

import pytest

from paddock.formatters import (
    format_driver_name,
    format_lap_time,
    format_points_difference,
    is_valid_driver_number,
    is_valid_race_date,
    kph_to_mph,
)


class TestFormatLapTime:
    @pytest.mark.parametrize(
        ("millis", "expected"),
        [
            (92608, "1:32.608"),
            (59999, "0:59.999"),
            (5504742, "91:44.742"),
            (None, "N/A"),
            (0, "N/A"),
        ],
    )
    def test_format(self, millis, expected) -> None:
        assert format_lap_time(millis) == expected


class TestDisplayHelpers:
    def test_driver_name(self) -> None:
        assert format_driver_name("Lando", "Norris") == "Norris, Lando"

    def test_kph_to_mph(self) -> None:
        assert kph_to_mph(210.383) == 130.73

    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [(437, 374, "+63"), (374, 437, "+63"), (10.5, 10, "+0.5"), (25, 25, "0")],
    )
    def test_points_difference(self, first, second, expected) -> None:
        assert format_points_difference(first, second) == expected


class TestValidation:
    @pytest.mark.parametrize(("number", "expected"), [(1, True), (99, True), (0, False), (100, False)])
    def test_driver_number(self, number, expected) -> None:
        assert is_valid_driver_number(number) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("2024-03-02", True), ("2024-02-30", False), ("N/A", False), ("", False)],
    )
    def test_race_date(self, value, expected) -> None:
        assert is_valid_race_date(value) is expected
