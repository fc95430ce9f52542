"""Pydantic models shared across API routes."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class LocationResult(BaseModel):
    timezone_id: str
    city: str
    country: str
    abbreviation: str
    display_label: str
    province: Optional[str] = None
    state: Optional[str] = None

    class Config:
        from_attributes = True


class SearchResponse(BaseModel):
    query: str
    limit: int
    count: int
    results: List[LocationResult]


class SelectionRequest(BaseModel):
    timezone_id: str = Field(..., min_length=1, max_length=64)
    display_label: Optional[str] = Field(default=None, max_length=200)

    @field_validator("timezone_id")
    @classmethod
    def strip_timezone(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("timezone_id cannot be blank")
        return value


class SelectionResponse(BaseModel):
    timezone_id: str
    display_label: str
    built_at: datetime
    catalog_size: int


class ClockResponse(BaseModel):
    timezone_id: str
    location: Optional[str] = None
    abbreviation: str
    iso_time: str
    digital_time: str
    digital_date: str
    hour_rotation: float
    minute_rotation: float
    second_rotation: float

    class Config:
        from_attributes = True


class OptionsResponse(BaseModel):
    default_timezone: str
    active_timezone: str
    active_location: str
    search_limit: int
    compact_search_limit: int
    country_locale: str
    catalog_size: int
    built_at: datetime
