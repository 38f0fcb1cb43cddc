"""Logging utilities."""

import logging
import sys
from typing import TextIO

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PACKAGE_LOGGER = "cardgames"
HANDLER_NAME = "cardgames-console"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Configure logging for the cardgames package.

    Calling this again replaces the handler it installed earlier, so the
    level and stream can be changed at runtime. Records still propagate to
    the root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream. Defaults to stdout.

    Returns:
        The package logger.

    Raises:
        ValueError: If level is not a known level name.
    """
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(name)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
