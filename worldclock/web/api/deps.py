"""FastAPI dependencies used across routers."""
from __future__ import annotations

from threading import Lock

from worldclock.config.settings import get_settings
from worldclock.locations.context import ClockService

_service: ClockService | None = None
_service_lock = Lock()


def get_clock_service() -> ClockService:
    """Return the process-wide clock service, building it once on first use."""
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = ClockService.from_settings(get_settings())
    return _service
