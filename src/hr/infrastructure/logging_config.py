"""Loguru configuration for command-line runs."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str) -> None:
    """Replace loguru's default sink with one stderr sink at *level*.

    Also re-enables the ``hr`` loggers, which are disabled on import.
    """
    logger.remove()
    logger.enable("hr")
    logger.add(sys.stderr, format=_FORMAT, level=level.upper(), colorize=None)
    logger.debug("Logging configured: level={}", level.upper())
