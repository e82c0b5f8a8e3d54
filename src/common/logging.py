"""
Logging configuration helpers.
The pager library only emits records on the `report_pager` logger; applications decide where they go.
Call `configure_logging` once from an entry point such as the preview API factory.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging, defaulting the level to `LOG_LEVEL` from settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_name = (level_name or get_settings().LOG_LEVEL).upper()
    level = getattr(logging, resolved_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("report_pager").setLevel(level)
    _LOGGING_CONFIGURED = True
