"""Loguru sink setup shared by the API and the CLI entry point."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else level.upper())
