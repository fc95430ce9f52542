"""FastAPI application entry point."""
from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worldclock.config.settings import get_settings
from worldclock.utils.logging import setup_logging
from .api import (
    clock as clock_routes,
    deps,
    locations as location_routes,
    logs as log_routes,
    meta as meta_routes,
    status as status_routes,
)

settings = get_settings()
setup_logging(level=settings.log_level)
logger = logging.getLogger("worldclock.web")

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(status_routes.router)
app.include_router(location_routes.router)
app.include_router(clock_routes.router)
app.include_router(meta_routes.router)
app.include_router(log_routes.router)


@app.get("/")
def index() -> dict:
    return {"message": "World clock API running", "docs": "/docs", "health": "/health"}


@app.on_event("startup")
def on_startup() -> None:
    logger.info("Building location catalog for %s", settings.default_timezone)
    deps.get_clock_service()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "worldclock.web.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
