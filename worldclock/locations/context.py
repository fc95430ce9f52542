"""Active timezone context and the service that swaps it on selection."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from worldclock.config.settings import Settings
from worldclock.locations.catalog import LocationEntry, build_catalog, primary_entry
from worldclock.locations.search import Selection, search
from worldclock.locations.sources import (
    CityRecord,
    CountryNames,
    TimezoneResolver,
    UnknownTimezoneError,
    as_utc,
    geonames_city_records,
    load_city_records,
)

logger = logging.getLogger("worldclock.service")


@dataclass(frozen=True)
class ClockContext:
    timezone_id: str
    display_label: str
    catalog: tuple[LocationEntry, ...]
    built_at: datetime

    @property
    def selection(self) -> Selection:
        return Selection(timezone_id=self.timezone_id, display_label=self.display_label)


def load_gazetteer(settings: Settings) -> list[dict]:
    if settings.gazetteer_path is not None:
        return load_city_records(settings.gazetteer_path)
    return geonames_city_records(settings.gazetteer_min_population)


class ClockService:
    """Owns the raw location sources and the current :class:`ClockContext`.

    The catalog is rebuilt only when a timezone is selected, never on a timer,
    so abbreviations stay as they were at selection time.
    """

    def __init__(
        self,
        timezone_ids: Sequence[str],
        city_records: Sequence[CityRecord],
        *,
        resolver: TimezoneResolver | None = None,
        countries: CountryNames | None = None,
    ) -> None:
        self._resolver = resolver or TimezoneResolver()
        self._countries = countries or CountryNames()
        self._timezone_ids = tuple(timezone_ids)
        self._city_records = tuple(city_records)
        self._context: ClockContext | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClockService":
        resolver = TimezoneResolver()
        service = cls(
            resolver.names(),
            load_gazetteer(settings),
            resolver=resolver,
            countries=CountryNames(settings.country_locale),
        )
        moment = as_utc(None)
        label = None
        if settings.default_location:
            abbreviation = resolver.abbreviation(settings.default_timezone, moment)
            label = f"{settings.default_location} ({abbreviation})"
        service.select(settings.default_timezone, label, moment)
        return service

    @property
    def resolver(self) -> TimezoneResolver:
        return self._resolver

    @property
    def context(self) -> ClockContext:
        if self._context is None:
            raise RuntimeError("No timezone selected yet")
        return self._context

    def build_context(
        self,
        timezone_id: str,
        display_label: Optional[str] = None,
        as_of: datetime | None = None,
    ) -> ClockContext:
        if not self._resolver.is_known(timezone_id):
            raise UnknownTimezoneError(f"Unknown timezone '{timezone_id}'")
        moment = as_utc(as_of)
        if not display_label:
            display_label = primary_entry(
                timezone_id, moment, resolver=self._resolver, countries=self._countries
            ).display_label
        catalog = build_catalog(
            self._timezone_ids,
            self._city_records,
            moment,
            resolver=self._resolver,
            countries=self._countries,
        )
        return ClockContext(
            timezone_id=timezone_id,
            display_label=display_label,
            catalog=catalog,
            built_at=moment,
        )

    def select(
        self,
        timezone_id: str,
        display_label: Optional[str] = None,
        as_of: datetime | None = None,
    ) -> Selection:
        """Adopt ``timezone_id`` as the active context, replacing the old catalog."""
        context = self.build_context(timezone_id, display_label, as_of)
        self._context = context
        logger.info(
            "Active timezone set to %s (%s)",
            context.timezone_id,
            context.display_label,
            extra={"timezone_id": context.timezone_id, "catalog_entries": len(context.catalog)},
        )
        return context.selection

    def search(self, query: str, limit: int) -> list[LocationEntry]:
        return search(self.context.catalog, query, limit)
