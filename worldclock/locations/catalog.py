"""Searchable location catalog built from the tz database and a city gazetteer."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from functools import lru_cache
from typing import Iterable, Optional

from pyuca import Collator

from worldclock.locations.sources import CityRecord, CountryNames, TimezoneResolver, as_utc

logger = logging.getLogger("worldclock.catalog")


@dataclass(frozen=True)
class LocationEntry:
    timezone_id: str
    city: str
    country: str
    abbreviation: str
    province: Optional[str] = None
    state: Optional[str] = None
    display_label: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "display_label", f"{self.city}, {self.country} ({self.abbreviation})")


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(text: str) -> tuple:
    """Unicode collation key, so accented labels sort next to their plain forms."""
    return _collator().sort_key(text)


def label_sort_key(entry: LocationEntry) -> tuple:
    return collation_key(entry.display_label), entry.display_label


def _segment(part: str) -> str:
    return part.replace("_", " ")


def _optional(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def primary_entry(
    timezone_id: str,
    as_of: datetime | None = None,
    *,
    resolver: TimezoneResolver | None = None,
    countries: CountryNames | None = None,
) -> LocationEntry:
    """Entry named after the last path segment and the zone's owning country."""
    resolver = resolver or TimezoneResolver()
    countries = countries or CountryNames()
    return _timezone_entries(timezone_id, as_utc(as_of), resolver, countries)[0]


def _timezone_entries(
    timezone_id: str,
    as_of: datetime,
    resolver: TimezoneResolver,
    countries: CountryNames,
) -> list[LocationEntry]:
    segments = [_segment(part) for part in timezone_id.split("/")]
    abbreviation = resolver.abbreviation(timezone_id, as_of)
    codes = resolver.country_codes(timezone_id)
    country = (countries.name(codes[0]) if codes else None) or segments[0]

    entries = [LocationEntry(timezone_id, segments[-1], country, abbreviation)]
    for index, segment in enumerate(segments):
        parent = country if index == 0 else segments[index - 1]
        entries.append(LocationEntry(timezone_id, segment, parent, abbreviation))
    return entries


def _city_entry(
    record: CityRecord,
    as_of: datetime,
    resolver: TimezoneResolver,
    countries: CountryNames,
) -> Optional[LocationEntry]:
    timezone_id = record.get("timezone")
    if not resolver.is_known(timezone_id):
        return None
    city = _optional(record.get("city"))
    if city is None:
        return None
    country = countries.name(record.get("iso2")) or _optional(record.get("country")) or ""
    return LocationEntry(
        timezone_id=timezone_id,
        city=city,
        country=country,
        abbreviation=resolver.abbreviation(timezone_id, as_of),
        province=_optional(record.get("province")),
        state=_optional(record.get("state")),
    )


def build_catalog(
    timezone_ids: Iterable[str],
    city_records: Iterable[CityRecord],
    as_of: datetime | None = None,
    *,
    resolver: TimezoneResolver | None = None,
    countries: CountryNames | None = None,
) -> tuple[LocationEntry, ...]:
    """Fuse timezone identifiers and city records into a sorted, duplicate-free catalog.

    Abbreviations are taken at ``as_of`` (now when omitted), so the result is
    only reproducible for a pinned instant. Unknown zones and city records
    pointing at unknown zones are skipped.
    """
    resolver = resolver or TimezoneResolver()
    countries = countries or CountryNames()
    moment = as_utc(as_of)
    started = time.perf_counter()

    entries: list[LocationEntry] = []
    zone_count = 0
    for timezone_id in timezone_ids:
        if not resolver.is_known(timezone_id):
            logger.debug("Skipping unknown timezone %r", timezone_id)
            continue
        zone_count += 1
        entries.extend(_timezone_entries(timezone_id, moment, resolver, countries))

    city_count = 0
    skipped = 0
    for record in city_records:
        entry = _city_entry(record, moment, resolver, countries)
        if entry is None:
            skipped += 1
            logger.debug("Skipping city record %r", record.get("city"))
            continue
        city_count += 1
        entries.append(entry)

    unique = dict.fromkeys(entries)
    catalog = tuple(sorted(unique, key=label_sort_key))

    logger.info(
        "Built location catalog: %d entries from %d zones and %d city records (%d skipped) in %.2fs",
        len(catalog),
        zone_count,
        city_count,
        skipped,
        time.perf_counter() - started,
        extra={"catalog_entries": len(catalog)},
    )
    return catalog
