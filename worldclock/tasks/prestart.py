"""Check configuration and location sources before the app starts."""
from __future__ import annotations

import logging
import sys

from worldclock.config.settings import get_settings
from worldclock.locations.context import ClockService
from worldclock.locations.sources import GazetteerError
from worldclock.utils.logging import setup_logging


def main() -> int:
    settings = get_settings()
    setup_logging(level=settings.log_level)
    logger = logging.getLogger("worldclock.prestart")
    try:
        service = ClockService.from_settings(settings)
    except GazetteerError:
        logger.exception("Gazetteer at %s could not be loaded", settings.gazetteer_path or "geonamescache")
        return 1
    context = service.context
    logger.info(
        "Catalog ready: %d entries, active location %s", len(context.catalog), context.display_label
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
