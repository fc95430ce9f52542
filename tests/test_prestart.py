import json

from worldclock.config.settings import Settings
from worldclock.tasks import prestart


def test_prestart_fails_on_missing_gazetteer(monkeypatch, tmp_path):
    settings = Settings(default_timezone="UTC", gazetteer_path=tmp_path / "missing.json")
    monkeypatch.setattr(prestart, "get_settings", lambda: settings)

    assert prestart.main() == 1


def test_prestart_builds_catalog(monkeypatch, tmp_path, cities):
    gazetteer = tmp_path / "cities.json"
    gazetteer.write_text(json.dumps(cities), encoding="utf-8")
    settings = Settings(default_timezone="America/Chicago", gazetteer_path=gazetteer)
    monkeypatch.setattr(prestart, "get_settings", lambda: settings)

    assert prestart.main() == 0
