"""Tests for duration display and HH:MM:SS conversion."""

import pytest

from clubdesk.schemas import DurationParts
from clubdesk.values import (
    duration_to_seconds,
    duration_to_time_string,
    format_duration,
    parse_time_string,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        ({"hours": 2, "minutes": 30}, "2г 30хв"),
        ({"hours": 1, "minutes": 0, "seconds": 15}, "1г 15с"),
        ({"minutes": 45}, "45хв"),
        ({"hours": 1.5}, "1.5г"),
        ({"hours": 2.0}, "2г"),
        ({}, "0с"),
        ({"hours": 0, "minutes": 0, "seconds": 0}, "0с"),
        ("2 hours", "2 hours"),
        ("", ""),
    ],
)
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


def test_format_duration_accepts_model():
    assert format_duration(DurationParts(hours=3, seconds=5)) == "3г 5с"


def test_duration_to_time_string():
    assert duration_to_time_string({"hours": 2, "minutes": 5, "seconds": 9}) == "02:05:09"
    assert duration_to_time_string({"minutes": 90}) == "00:90:00"
    assert duration_to_time_string({}) == "00:00:00"
    assert duration_to_time_string(DurationParts(hours=12)) == "12:00:00"
    assert duration_to_time_string("1:30") == "1:30"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("02:05:09", {"hours": 2, "minutes": 5, "seconds": 9}),
        ("5", {"hours": 5, "minutes": 0, "seconds": 0}),
        ("1:75", {"hours": 1, "minutes": 75, "seconds": 0}),
        ("", {"hours": 0, "minutes": 0, "seconds": 0}),
        ("ab:10:xx", {"hours": 0, "minutes": 10, "seconds": 0}),
        ("1:2:3:4", {"hours": 1, "minutes": 2, "seconds": 3}),
    ],
)
def test_parse_time_string(text, expected):
    assert parse_time_string(text) == expected


def test_time_string_round_trip_keeps_parts():
    parts = {"hours": 2, "minutes": 5, "seconds": 9}
    assert parse_time_string(duration_to_time_string(parts)) == parts


def test_duration_to_seconds():
    assert duration_to_seconds({"hours": 1, "minutes": 30}) == 5400
    assert duration_to_seconds(DurationParts(minutes=2, seconds=5)) == 125
    assert duration_to_seconds("00:01:10") == 70
    assert duration_to_seconds("2 hours") == 0
    assert duration_to_seconds({}) == 0
