"""Process-wide logging setup for hosts embedding cyclecast."""

from __future__ import annotations

import logging
import sys

from cyclecast.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Install the standard handler on the root logger and return the package logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stdout,
    )
    logger = logging.getLogger("cyclecast")
    logger.info("Logging configured for %s [%s]", settings.app_name, settings.environment)
    return logger
