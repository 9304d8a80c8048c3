"""Logging configuration for the CLI and HTTP front ends."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "testnumbers"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once: the handler is installed only the first time,
    later calls just update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, "_testnumbers_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._testnumbers_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
