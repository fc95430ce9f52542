"""Metadata endpoints for UI configuration options."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from worldclock.config.settings import get_settings
from worldclock.locations.context import ClockService

from . import deps, schemas

router = APIRouter(prefix="/api/meta", tags=["meta"])


@router.get("/options", response_model=schemas.OptionsResponse)
def get_options(service: ClockService = Depends(deps.get_clock_service)) -> schemas.OptionsResponse:
    settings = get_settings()
    context = service.context
    return schemas.OptionsResponse(
        default_timezone=settings.default_timezone,
        active_timezone=context.timezone_id,
        active_location=context.display_label,
        search_limit=settings.search_limit,
        compact_search_limit=settings.compact_search_limit,
        country_locale=settings.country_locale,
        catalog_size=len(context.catalog),
        built_at=context.built_at,
    )
