"""Timezone, country and gazetteer lookups feeding the location catalog."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

import geonamescache
import pytz
from babel import Locale

logger = logging.getLogger("worldclock.sources")

CityRecord = Mapping[str, Any]

# Entries from the tz source tree that are not real places
_IGNORED_ZONES = frozenset({"Factory", "localtime", "posixrules"})


class GazetteerError(RuntimeError):
    """Raised when the city gazetteer file cannot be read."""


class UnknownTimezoneError(ValueError):
    """Raised when a timezone identifier is not in the tz database."""


@lru_cache(maxsize=1)
def _known_zones() -> frozenset[str]:
    return frozenset(available_timezones())


@lru_cache(maxsize=1)
def _zone_countries() -> dict[str, tuple[str, ...]]:
    mapping: dict[str, list[str]] = {}
    for code in sorted(pytz.country_timezones):
        for zone_name in pytz.country_timezones[code]:
            mapping.setdefault(zone_name, []).append(code)
    return {zone_name: tuple(codes) for zone_name, codes in mapping.items()}


def as_utc(moment: datetime | None) -> datetime:
    """Normalise an instant to aware UTC; ``None`` means now and naive means UTC."""
    if moment is None:
        return datetime.now(timezone.utc)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class TimezoneResolver:
    """Answers questions about IANA timezone identifiers."""

    def names(self) -> list[str]:
        return sorted(name for name in _known_zones() if name not in _IGNORED_ZONES)

    def is_known(self, timezone_id: str | None) -> bool:
        if not timezone_id or not isinstance(timezone_id, str):
            return False
        return timezone_id in _known_zones()

    def zone(self, timezone_id: str) -> ZoneInfo:
        if not self.is_known(timezone_id):
            raise UnknownTimezoneError(f"Unknown timezone '{timezone_id}'")
        try:
            return ZoneInfo(timezone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise UnknownTimezoneError(f"Unknown timezone '{timezone_id}'") from exc

    def abbreviation(self, timezone_id: str, as_of: datetime | None = None) -> str:
        local = as_utc(as_of).astimezone(self.zone(timezone_id))
        return local.tzname() or ""

    def country_codes(self, timezone_id: str) -> tuple[str, ...]:
        return _zone_countries().get(timezone_id, ())


class CountryNames:
    """Maps ISO 3166 alpha-2 codes to display names in one locale."""

    def __init__(self, locale: str = "en") -> None:
        self.locale = locale
        self._territories = Locale.parse(locale).territories

    def name(self, code: str | None) -> Optional[str]:
        if not code or not isinstance(code, str):
            return None
        return self._territories.get(code.strip().upper())


def load_city_records(path: str | Path) -> list[dict[str, Any]]:
    """Read a gazetteer JSON file holding a list of city records."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise GazetteerError(f"Gazetteer not found at {path}") from exc
    except json.JSONDecodeError as exc:
        raise GazetteerError(f"Gazetteer at {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise GazetteerError(f"Gazetteer at {path} must contain a list of records")

    records = [item for item in payload if isinstance(item, dict)]
    if len(records) != len(payload):
        logger.warning("Ignored %d non-object rows in %s", len(payload) - len(records), path)
    logger.info("Loaded %d city records from %s", len(records), path)
    return records



def geonames_city_records(min_population: int = 15000) -> list[dict[str, Any]]:
    """City records from the GeoNames dump shipped with ``geonamescache``.

    US rows carry the state name as ``province`` and the postal code as
    ``state``; other countries only expose numeric admin codes, so both stay
    empty there.
    """
    cache = geonamescache.GeonamesCache(min_city_population=min_population)
    country_rows = cache.get_countries()
    us_states = cache.get_us_states()

    records: list[dict[str, Any]] = []
    for row in cache.get_cities().values():
        code = row.get("countrycode") or ""
        admin1 = row.get("admin1code") or ""
        state_row = us_states.get(admin1) if code == "US" else None
        records.append(
            {
                "city": row.get("name"),
                "timezone": row.get("timezone"),
                "iso2": code,
                "country": country_rows.get(code, {}).get("name", code),
                "province": state_row["name"] if state_row else None,
                "state": admin1 if state_row else None,
            }
        )
    logger.info("Loaded %d city records from geonamescache (population >= %d)", len(records), min_population)
    return records
