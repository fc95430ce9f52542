"""Ranked substring search over a location catalog."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from worldclock.locations.catalog import LocationEntry, label_sort_key


@dataclass(frozen=True)
class Selection:
    timezone_id: str
    display_label: str


def _searchable(entry: LocationEntry) -> Iterable[str]:
    yield entry.city
    yield entry.country
    yield entry.timezone_id
    yield entry.abbreviation
    if entry.province:
        yield entry.province
    if entry.state:
        yield entry.state


def matches(entry: LocationEntry, needle: str) -> bool:
    """``needle`` must already be case-folded."""
    return any(needle in value.casefold() for value in _searchable(entry))


def _rank_key(entry: LocationEntry, needle: str) -> tuple:
    city = entry.city.casefold()
    return (
        city != needle,
        entry.country.casefold() != needle,
        not city.startswith(needle),
        label_sort_key(entry),
    )


def search(catalog: Sequence[LocationEntry], query: str, limit: int) -> list[LocationEntry]:
    """Return at most ``limit`` entries matching ``query``, best match first.

    Ranking: exact city, then exact country, then city prefix, then label
    order. An empty query matches every entry; callers that want an empty
    suggestion list for blank input must check before calling.
    """
    if limit <= 0:
        return []
    needle = (query or "").casefold()
    matched = [entry for entry in catalog if matches(entry, needle)]
    matched.sort(key=lambda entry: _rank_key(entry, needle))
    return list(dict.fromkeys(matched))[:limit]


def select(entry: LocationEntry) -> Selection:
    return Selection(timezone_id=entry.timezone_id, display_label=entry.display_label)
