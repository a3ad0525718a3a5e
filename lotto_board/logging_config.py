"""Logging configuration."""

from __future__ import annotations

import logging
from flask import Flask


def configure_logging(app: Flask) -> None:
    """Configure plain single-line logs.

    Note: Using stdlib logging only (no extra deps).
    """

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Connection pool chatter for every origin call
    logging.getLogger("urllib3").setLevel(logging.WARNING)
