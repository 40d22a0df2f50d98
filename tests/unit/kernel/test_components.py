"""Unit tests for date/time components."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import pytest

from fix_commons.kernel.errors import InvalidArgumentError, ParseError
from fix_commons.kernel.time import (
    DateComponent,
    diff_datetime,
    diff_datetime_iso,
    get_component,
)

SAMPLE = datetime(2018, 8, 15, 14, 35, 48, 456_789)


class TestGetComponent:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("Y", 2018),
            ("M", 8),
            ("D", 15),
            ("h", 14),
            ("m", 35),
            ("s", 48),
            ("ms", 456),
            ("mc", 456_789),
            ("ns", 456_789_000),
        ],
    )
    def test_datetime_components(self, code: str, expected: int) -> None:
        assert get_component(SAMPLE, code) == expected

    def test_date_component_of_date(self) -> None:
        assert get_component(date(2018, 8, 15), "M") == 8

    def test_time_component_of_time(self) -> None:
        assert get_component(time(14, 35, 48, 456_000), "ms") == 456

    def test_time_component_of_date_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_component(date(2018, 8, 15), "h")

    def test_date_component_of_time_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_component(time(14, 35), "D")

    @pytest.mark.parametrize("code", ["W", "", "y"])
    def test_unknown_component_raises(self, code: str) -> None:
        with pytest.raises(InvalidArgumentError):
            get_component(SAMPLE, code)

    def test_none_source_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            get_component(None, "Y")  # type: ignore[arg-type]

    @pytest.mark.parametrize("code", [5, None, b"Y"])
    def test_non_string_component_raises(self, code: object) -> None:
        with pytest.raises(InvalidArgumentError):
            DateComponent.parse(code)  # type: ignore[arg-type]


class TestDiffDateTime:
    def test_months_truncate_on_day(self) -> None:
        assert diff_datetime(datetime(2024, 3, 15), datetime(2024, 1, 20), "M") == 1
        assert diff_datetime(datetime(2024, 1, 20), datetime(2024, 3, 15), "M") == -1

    def test_years_across_leap_day(self) -> None:
        assert diff_datetime(datetime(2024, 2, 28), datetime(2020, 2, 29), "Y") == 3
        assert diff_datetime(datetime(2024, 2, 29), datetime(2020, 2, 29), "Y") == 4

    def test_days_truncate_toward_zero(self) -> None:
        later = datetime(2024, 1, 3, 12, 0)
        earlier = datetime(2024, 1, 1, 13, 0)
        assert diff_datetime(later, earlier, "D") == 1
        assert diff_datetime(earlier, later, "D") == -1

    @pytest.mark.parametrize(
        "delta, code, expected",
        [
            (timedelta(minutes=90), "h", 1),
            (timedelta(minutes=90), "m", 90),
            (timedelta(seconds=1.5), "ms", 1500),
            (timedelta(seconds=1.5), "s", 1),
            (timedelta(microseconds=1), "mc", 1),
            (timedelta(microseconds=1), "ns", 1000),
        ],
    )
    def test_time_units(self, delta: timedelta, code: str, expected: int) -> None:
        assert diff_datetime(SAMPLE + delta, SAMPLE, code) == expected

    def test_aware_values_compare_in_utc(self) -> None:
        aware = datetime(2024, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
        assert diff_datetime(aware, datetime(2024, 1, 1), "s") == 0

    def test_none_argument_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            diff_datetime(None, SAMPLE, "D")  # type: ignore[arg-type]

    def test_enum_diff_matches_function(self) -> None:
        later = SAMPLE + timedelta(days=40)
        assert DateComponent.DAY.diff(later, SAMPLE) == diff_datetime(later, SAMPLE, "D") == 40


class TestDiffDateTimeIso:
    def test_offsets_are_honoured(self) -> None:
        assert diff_datetime_iso("2024-01-02T00:00:00Z", "2024-01-01T00:00:00+00:00", "h") == 24
        assert diff_datetime_iso("2024-01-01T03:00:00+03:00", "2024-01-01T00:00:00Z", "m") == 0

    def test_malformed_iso_raises_parse_error(self) -> None:
        with pytest.raises(ParseError):
            diff_datetime_iso("yesterday", "2024-01-01T00:00:00Z", "D")
