"""Location search and timezone selection routes."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from worldclock.config.settings import get_settings
from worldclock.locations.context import ClockService
from worldclock.locations.sources import UnknownTimezoneError

from . import deps, schemas

router = APIRouter(prefix="/api/locations", tags=["locations"])
logger = logging.getLogger("worldclock.web.locations")


@router.get("/search", response_model=schemas.SearchResponse)
def search_locations(
    q: str = Query("", max_length=100, description="Free-text city, country, timezone or abbreviation"),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    service: ClockService = Depends(deps.get_clock_service),
) -> schemas.SearchResponse:
    limit = limit or get_settings().search_limit
    query = q.strip()
    # A blank box shows no suggestions.
    entries = service.search(query, limit) if query else []
    return schemas.SearchResponse(
        query=query,
        limit=limit,
        count=len(entries),
        results=[schemas.LocationResult.model_validate(entry) for entry in entries],
    )


@router.post("/select", response_model=schemas.SelectionResponse)
def select_location(
    payload: schemas.SelectionRequest,
    service: ClockService = Depends(deps.get_clock_service),
) -> schemas.SelectionResponse:
    try:
        selection = service.select(payload.timezone_id, payload.display_label)
    except UnknownTimezoneError as exc:
        logger.warning("Rejected selection: %s", exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    context = service.context
    return schemas.SelectionResponse(
        timezone_id=selection.timezone_id,
        display_label=selection.display_label,
        built_at=context.built_at,
        catalog_size=len(context.catalog),
    )
