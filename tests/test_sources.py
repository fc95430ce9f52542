import pytest

from worldclock.config.settings import Settings
from worldclock.locations import sources
from worldclock.locations.catalog import build_catalog
from worldclock.locations.context import load_gazetteer
from worldclock.locations.search import search
from worldclock.locations.sources import TimezoneResolver, UnknownTimezoneError, geonames_city_records


def test_unknown_timezones_do_not_grow_lookup_cache():
    resolver = TimezoneResolver()
    resolver.is_known("Europe/Paris")
    before = sources._known_zones.cache_info()

    assert not any(resolver.is_known(f"Mars/Crater_{index}") for index in range(5000))

    after = sources._known_zones.cache_info()
    assert after.currsize == before.currsize == 1
    assert after.misses == before.misses


def test_zone_rejects_unknown_and_malformed_names():
    resolver = TimezoneResolver()

    for name in ["Mars/Olympus_Mons", "../etc/passwd", "", None, "America"]:
        with pytest.raises(UnknownTimezoneError):
            resolver.zone(name)
    assert str(resolver.zone("Asia/Tokyo")) == "Asia/Tokyo"


def test_geonames_records_reach_beyond_major_cities():
    records = geonames_city_records()

    assert len(records) > 20000
    jefferson = [record for record in records if record["city"] == "Jefferson City" and record["iso2"] == "US"]
    assert jefferson
    assert jefferson[0]["timezone"] == "America/Chicago"
    assert jefferson[0]["province"] == "Missouri"
    assert jefferson[0]["state"] == "MO"


def test_non_major_city_is_searchable_with_its_province(summer):
    records = [record for record in geonames_city_records() if record["city"] in {"Jefferson City", "Guadalajara"}]

    catalog = build_catalog([], records, summer)
    results = search(catalog, "jefferson city", 10)

    missouri = [entry for entry in results if entry.province == "Missouri"]
    assert missouri
    assert missouri[0].display_label == "Jefferson City, United States (CDT)"
    assert missouri[0].state == "MO"
    assert search(catalog, "guadalajara", 10)[0].country == "Mexico"


def test_load_gazetteer_prefers_configured_file(tmp_path):
    gazetteer = tmp_path / "cities.json"
    gazetteer.write_text('[{"city": "Lyon", "timezone": "Europe/Paris", "iso2": "FR"}]', encoding="utf-8")

    assert load_gazetteer(Settings(default_timezone="UTC", gazetteer_path=gazetteer)) == [
        {"city": "Lyon", "timezone": "Europe/Paris", "iso2": "FR"}
    ]
    assert len(load_gazetteer(Settings(default_timezone="UTC"))) > 20000
