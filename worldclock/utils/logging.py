"""Logging setup shared by the API and the catalog builder."""
from __future__ import annotations

import logging

from worldclock.utils.log_buffer import get_log_buffer_handler

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(name: str = "worldclock", level: str | int = "INFO") -> logging.Logger:
    """Configure logging for the application if it is not already configured."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    buffer_handler = get_log_buffer_handler()
    if buffer_handler not in logger.handlers:
        buffer_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(buffer_handler)
    logger.setLevel(level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO))

    # Avoid duplicate logging from child loggers
    logger.propagate = False
    return logger
