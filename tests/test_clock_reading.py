from datetime import datetime, timezone

import pytest

from worldclock.clock.reading import format_digital_date, hand_rotations, read_clock
from worldclock.locations.sources import UnknownTimezoneError


def test_read_clock_in_chicago_afternoon():
    at = datetime(2024, 7, 1, 20, 15, 30, 500000, tzinfo=timezone.utc)

    reading = read_clock("America/Chicago", at, location="Columbia, United States (CDT)")

    assert reading.abbreviation == "CDT"
    assert reading.digital_time == "03:15:30 PM"
    assert reading.digital_date == "Monday, July 1, 2024"
    assert reading.location == "Columbia, United States (CDT)"
    assert reading.iso_time.startswith("2024-07-01T15:15:30.500000-05:00")
    assert reading.hour_rotation == pytest.approx(97.5)
    assert reading.minute_rotation == pytest.approx(93.05)
    assert reading.second_rotation == pytest.approx(183.0)


def test_hand_rotations_at_midnight_and_noon():
    assert hand_rotations(datetime(2024, 1, 1, 0, 0, 0)) == (0, 0, 0)
    assert hand_rotations(datetime(2024, 1, 1, 12, 0, 0)) == (0, 0, 0)


def test_hand_rotations_just_before_twelve():
    hour, minute, second = hand_rotations(datetime(2024, 1, 1, 11, 59, 59, 999000))

    assert hour == pytest.approx(359.5)
    assert minute == pytest.approx(359.9999)
    assert second == pytest.approx(359.994)


def test_digital_date_has_no_zero_padding():
    assert format_digital_date(datetime(2024, 3, 5)) == "Tuesday, March 5, 2024"


def test_read_clock_rejects_unknown_timezone():
    with pytest.raises(UnknownTimezoneError):
        read_clock("Mars/Olympus_Mons")
