"""Opt-in logging configuration for applications embedding transact.

The library itself only creates loggers; handlers are the application's call.
"""

from __future__ import annotations

import logging

from transact.app.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("transact").setLevel(settings.log_level)
