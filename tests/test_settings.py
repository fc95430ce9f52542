import pytest
from pydantic import ValidationError

from worldclock.config.settings import Settings, _load_settings


def test_defaults_are_valid():
    settings = Settings(default_timezone="America/Chicago")

    assert settings.search_limit == 20
    assert settings.compact_search_limit == 10
    assert settings.default_location == "Columbia, United States"
    assert settings.gazetteer_path is None
    assert settings.gazetteer_min_population == 15000


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DEFAULT_TIMEZONE", "Europe/Paris")
    monkeypatch.setenv("SEARCH_LIMIT", "15")
    monkeypatch.setenv("COMPACT_SEARCH_LIMIT", "5")
    monkeypatch.setenv("GAZETTEER_PATH", str(tmp_path / "cities.json"))
    monkeypatch.setenv("GAZETTEER_MIN_POPULATION", "5000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEFAULT_LOCATION", "")

    settings = _load_settings()

    assert settings.default_timezone == "Europe/Paris"
    assert settings.search_limit == 15
    assert settings.compact_search_limit == 5
    assert settings.gazetteer_path == tmp_path / "cities.json"
    assert settings.gazetteer_min_population == 5000
    assert settings.log_level == "DEBUG"
    assert settings.default_location is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"default_timezone": "Mars/Olympus_Mons"},
        {"search_limit": 0},
        {"search_limit": 101},
        {"search_limit": 5, "compact_search_limit": 10},
        {"log_level": "chatty"},
        {"gazetteer_min_population": 2500},
        {"country_locale": "not-a-locale"},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**{"default_timezone": "UTC", **overrides})


def test_assignment_is_validated():
    settings = Settings(default_timezone="UTC")

    with pytest.raises(ValidationError):
        settings.default_timezone = "Nowhere/Special"
