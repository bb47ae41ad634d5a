"""Loguru setup shared by every entry point."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(level: str = "WARNING") -> None:
    """Route loguru to stderr at `level`; stdout stays reserved for results."""

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=None)
