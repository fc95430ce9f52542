"""Current clock reading for the active timezone."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from worldclock.clock.reading import read_clock
from worldclock.locations.context import ClockService

from . import deps, schemas

router = APIRouter(prefix="/api/clock", tags=["clock"])


@router.get("", response_model=schemas.ClockResponse)
def get_clock(service: ClockService = Depends(deps.get_clock_service)) -> schemas.ClockResponse:
    context = service.context
    reading = read_clock(context.timezone_id, location=context.display_label, resolver=service.resolver)
    return schemas.ClockResponse.model_validate(reading)
