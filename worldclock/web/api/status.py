"""Health endpoint."""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from worldclock.locations.context import ClockService

from . import deps

router = APIRouter(tags=["status"])


@router.get("/health")
def healthcheck(service: ClockService = Depends(deps.get_clock_service)) -> dict:
    context = service.context
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(),
        "active_timezone": context.timezone_id,
        "catalog_size": len(context.catalog),
        "catalog_built_at": context.built_at.isoformat(),
    }
