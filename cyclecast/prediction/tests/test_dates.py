"""Tests for boundary date parsing."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from cyclecast.prediction.base import InvalidDateError
from cyclecast.prediction.dates import (
    format_display_date,
    parse_logged_date,
    parse_logged_dates,
)


class TestParseLoggedDate:
    def test_date_passthrough(self) -> None:
        assert parse_logged_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_datetime_drops_time(self) -> None:
        assert parse_logged_date(datetime(2024, 1, 1, 22, 15)) == date(2024, 1, 1)

    def test_iso_string(self) -> None:
        assert parse_logged_date("2024-01-29") == date(2024, 1, 29)

    def test_iso_string_with_whitespace(self) -> None:
        assert parse_logged_date("  2024-01-29 ") == date(2024, 1, 29)

    def test_iso_datetime_string(self) -> None:
        assert parse_logged_date("2024-01-29T12:00:00") == date(2024, 1, 29)

    def test_iso_datetime_with_offset(self) -> None:
        assert parse_logged_date("2024-01-29T23:30:00+02:00") == date(2024, 1, 29)
        assert parse_logged_date("2024-01-29 08:30") == date(2024, 1, 29)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "Apr 10",
            "2024-13-01",
            "2024-02-30",
            "yesterday",
            "20240101",
            "2024-1-5",
            "2024-W01-1",
            "2024-01-29Tnoon",
        ],
    )
    def test_rejects_unparsable_strings(self, value: str) -> None:
        with pytest.raises(InvalidDateError):
            parse_logged_date(value)

    @pytest.mark.parametrize("value", [None, 20240101, 1.5])
    def test_rejects_other_types(self, value: object) -> None:
        with pytest.raises(InvalidDateError):
            parse_logged_date(value)  # type: ignore[arg-type]

    def test_invalid_date_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_logged_date("not a date")


class TestParseLoggedDates:
    def test_mixed_inputs(self) -> None:
        parsed = parse_logged_dates(["2024-01-01", date(2024, 1, 2), datetime(2024, 1, 3, 8)])
        assert parsed == [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)]

    def test_one_bad_value_fails_batch(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_logged_dates(["2024-01-01", "Jan 2"])


class TestFormatDisplayDate:
    def test_no_zero_padding(self) -> None:
        assert format_display_date(date(2024, 2, 6)) == "2/6/2024"

    def test_two_digit_parts(self) -> None:
        assert format_display_date(date(2024, 12, 25)) == "12/25/2024"
