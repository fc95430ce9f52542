"""Application configuration and environment management."""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


load_dotenv()

GEONAMES_POPULATION_TIERS = frozenset({500, 1000, 5000, 15000})


def _is_zone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def _detect_timezone() -> str:
    candidates = [os.environ.get("LOCAL_TIMEZONE"), os.environ.get("TZ")]
    try:
        import tzlocal

        candidates.append(tzlocal.get_localzone_name())
    except Exception:
        pass

    for candidate in candidates:
        if candidate and _is_zone(candidate):
            return candidate
    return "America/Chicago"


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="World Clock", description="Human readable app name")
    environment: str = Field(default="development", description="Runtime environment name")

    default_timezone: str = Field(
        default_factory=_detect_timezone,
        description="Olson timezone identifier shown on startup",
    )
    default_location: Optional[str] = Field(
        default="Columbia, United States",
        description="Location label shown on startup, abbreviation is appended",
    )
    country_locale: str = Field(default="en", description="Locale used for country display names")

    gazetteer_path: Optional[Path] = Field(
        default=None,
        description="JSON file with city records (city, timezone, iso2, country, province, state); GeoNames when unset",
    )
    gazetteer_min_population: int = Field(
        default=15000,
        description="Smallest city population taken from the GeoNames dump",
    )

    search_limit: int = Field(default=20, description="Maximum suggestions returned by search")
    compact_search_limit: int = Field(default=10, description="Suggestion cap for compact widgets")

    log_level: str = Field(default="INFO", description="Root log level for the worldclock logger")

    @field_validator("default_timezone")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        if not _is_zone(value):
            raise ValueError(f"Unknown timezone '{value}'")
        return value

    @field_validator("country_locale")
    @classmethod
    def _validate_locale(cls, value: str) -> str:
        try:
            Locale.parse(value)
        except (UnknownLocaleError, ValueError) as exc:
            raise ValueError(f"Unknown locale '{value}'") from exc
        return value

    @field_validator("search_limit", "compact_search_limit")
    @classmethod
    def _validate_limit(cls, value: int) -> int:
        if not 1 <= value <= 100:
            raise ValueError("Search limits must be between 1 and 100")
        return value

    @field_validator("gazetteer_min_population")
    @classmethod
    def _validate_min_population(cls, value: int) -> int:
        if value not in GEONAMES_POPULATION_TIERS:
            raise ValueError(f"gazetteer_min_population must be one of {sorted(GEONAMES_POPULATION_TIERS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        value_upper = value.upper()
        if not isinstance(logging.getLevelName(value_upper), int):
            raise ValueError(f"Unknown log level '{value}'")
        return value_upper

    @model_validator(mode="after")
    def _check_limits(self) -> "Settings":
        if self.compact_search_limit > self.search_limit:
            raise ValueError("compact_search_limit cannot exceed search_limit")
        return self


_ENV_MAPPING = {
    "APP_NAME": "app_name",
    "ENVIRONMENT": "environment",
    "DEFAULT_TIMEZONE": "default_timezone",
    "DEFAULT_LOCATION": "default_location",
    "COUNTRY_LOCALE": "country_locale",
    "GAZETTEER_PATH": "gazetteer_path",
    "GAZETTEER_MIN_POPULATION": "gazetteer_min_population",
    "SEARCH_LIMIT": "search_limit",
    "COMPACT_SEARCH_LIMIT": "compact_search_limit",
    "LOG_LEVEL": "log_level",
}


def _load_settings() -> Settings:
    data: dict[str, object] = {}
    for env_name, field_name in _ENV_MAPPING.items():
        if env_name not in os.environ:
            continue
        value = os.environ[env_name].strip()
        if field_name in {"default_location", "gazetteer_path"} and not value:
            data[field_name] = None
        else:
            data[field_name] = value
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return _load_settings()
