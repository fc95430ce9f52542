"""Expose recent log entries for troubleshooting."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from worldclock.utils.log_buffer import get_log_buffer_handler

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.get("", response_model=dict)
def list_logs(
    limit: int = Query(200, ge=1, le=1000),
    timezone_id: Optional[str] = Query(default=None, description="Only entries tagged with this timezone."),
) -> dict:
    handler = get_log_buffer_handler()
    entries = handler.get_entries(limit, timezone_id=timezone_id)
    return {
        "entries": entries,
        "count": len(entries),
        "limit": limit,
        "available": handler.size(),
        "capacity": handler.capacity,
    }


@router.delete("", response_model=dict)
def clear_logs() -> dict:
    handler = get_log_buffer_handler()
    handler.clear()
    return {"cleared": True}
