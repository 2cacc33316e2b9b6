"""Loguru sink configuration for the command-line front door."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(verbose: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink.

    ``verbose`` lowers the threshold to DEBUG; otherwise only warnings and
    errors reach the terminal so listing output stays clean.
    """
    logger.remove()
    level = "DEBUG" if verbose else "WARNING"
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.debug("Logging initialized at {}", level)
