"""Tests for time zone and day-clock helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.utils import is_valid_timezone, resolve_timezone

INSTANT = datetime(2024, 5, 6, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC+03:00", timedelta(hours=3)),
        ("UTC-05:30", timedelta(hours=-5, minutes=-30)),
        ("GMT+14", timedelta(hours=14)),
        ("utc+0930", timedelta(hours=9, minutes=30)),
    ],
)
def test_offset_names_resolve_to_fixed_zones(name, offset):
    assert is_valid_timezone(name)
    assert resolve_timezone(name).utcoffset(INSTANT) == offset


@pytest.mark.parametrize(
    "name", ["UTC+30", "UTC-99", "UTC+25", "UTC+05:99", "UTC+", "Mars/Olympus", "  "]
)
def test_out_of_range_or_unknown_names_are_invalid(name):
    assert not is_valid_timezone(name)


@pytest.mark.parametrize("name", ["UTC+30", "UTC+25", "UTC+05:99", "Mars/Olympus", None, ""])
def test_unresolvable_names_fall_back_to_utc(name):
    assert resolve_timezone(name).utcoffset(INSTANT) == timedelta(0)
