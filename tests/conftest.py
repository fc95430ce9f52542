from datetime import datetime, timezone

import pytest

from worldclock.locations.context import ClockService

SUMMER = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
WINTER = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

ZONES = [
    "America/Chicago",
    "America/New_York",
    "America/Argentina/Buenos_Aires",
    "Europe/Paris",
    "Europe/London",
    "UTC",
]

CITIES = [
    {
        "city": "Columbia",
        "timezone": "America/Chicago",
        "iso2": "US",
        "country": "United States of America",
        "province": "Missouri",
        "state": "MO",
    },
    {
        "city": "Columbia",
        "timezone": "America/New_York",
        "iso2": "US",
        "country": "United States of America",
        "province": "South Carolina",
        "state": "SC",
    },
    {"city": "Lyon", "timezone": "Europe/Paris", "iso2": "FR", "country": "France", "province": "Auvergne-Rhône-Alpes"},
    {"city": "Atlantis", "timezone": "Ocean/Atlantis", "iso2": "US", "country": "Nowhere"},
]


@pytest.fixture
def zones():
    return list(ZONES)


@pytest.fixture
def cities():
    return [dict(record) for record in CITIES]


@pytest.fixture
def service(zones, cities):
    clock_service = ClockService(zones, cities)
    clock_service.select("America/Chicago", "Columbia, United States (CDT)", as_of=SUMMER)
    return clock_service


@pytest.fixture
def summer():
    return SUMMER


@pytest.fixture
def winter():
    return WINTER
