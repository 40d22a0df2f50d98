"""Unit tests for time-zone id resolution."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from fix_commons.kernel.errors import InvalidArgumentError
from fix_commons.kernel.time import resolve_zone


class TestResolveZone:
    @pytest.mark.parametrize("zone_id", ["UTC", "Z", " UTC "])
    def test_utc_aliases(self, zone_id: str) -> None:
        assert resolve_zone(zone_id) is UTC

    def test_region_name(self) -> None:
        zone = resolve_zone("Europe/London")
        assert isinstance(zone, ZoneInfo)
        assert datetime(2024, 7, 1, tzinfo=zone).utcoffset() == timedelta(hours=1)

    @pytest.mark.parametrize(
        "zone_id, offset",
        [
            ("+3", timedelta(hours=3)),
            ("-03", timedelta(hours=-3)),
            ("+03:30", timedelta(hours=3, minutes=30)),
            ("-0530", timedelta(hours=-5, minutes=-30)),
            ("+05:30:15", timedelta(hours=5, minutes=30, seconds=15)),
            ("-053015", -timedelta(hours=5, minutes=30, seconds=15)),
            ("+18:00", timedelta(hours=18)),
            ("-18", timedelta(hours=-18)),
        ],
    )
    def test_fixed_offsets(self, zone_id: str, offset: timedelta) -> None:
        assert resolve_zone(zone_id).utcoffset(None) == offset

    @pytest.mark.parametrize(
        "zone_id",
        ["", "   ", "+18:01", "+19", "+05:60", "+5:30", "+123", "Nowhere/City"],
    )
    def test_invalid_ids_raise(self, zone_id: str) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            resolve_zone(zone_id)
        assert info.value.argument == "zone_id"
