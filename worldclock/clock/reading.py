"""Clock hand angles and digital strings for one instant in one timezone."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from worldclock.locations.sources import TimezoneResolver, as_utc


@dataclass(frozen=True)
class ClockReading:
    timezone_id: str
    location: Optional[str]
    abbreviation: str
    iso_time: str
    digital_time: str
    digital_date: str
    hour_rotation: float
    minute_rotation: float
    second_rotation: float


def hand_rotations(local: datetime) -> tuple[float, float, float]:
    """Degrees clockwise from twelve for the hour, minute and second hands."""
    hours = local.hour % 12
    minutes = local.minute
    seconds = local.second
    milliseconds = local.microsecond // 1000
    return (
        hours * 30 + minutes * 0.5,
        minutes * 6 + seconds * 0.1 + milliseconds * 0.0001,
        seconds * 6 + milliseconds * 0.006,
    )


def format_digital_time(local: datetime) -> str:
    return local.strftime("%I:%M:%S %p")


def format_digital_date(local: datetime) -> str:
    return f"{local:%A, %B} {local.day}, {local:%Y}"


def read_clock(
    timezone_id: str,
    at: datetime | None = None,
    location: Optional[str] = None,
    *,
    resolver: TimezoneResolver | None = None,
) -> ClockReading:
    resolver = resolver or TimezoneResolver()
    local = as_utc(at).astimezone(resolver.zone(timezone_id))
    hour_rotation, minute_rotation, second_rotation = hand_rotations(local)
    return ClockReading(
        timezone_id=timezone_id,
        location=location,
        abbreviation=local.tzname() or "",
        iso_time=local.isoformat(),
        digital_time=format_digital_time(local),
        digital_date=format_digital_date(local),
        hour_rotation=hour_rotation,
        minute_rotation=minute_rotation,
        second_rotation=second_rotation,
    )
