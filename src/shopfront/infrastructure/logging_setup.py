"""Logging configuration for the ``shopfront`` logger tree."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once: later calls update the level and point
    the existing handler at the current ``sys.stderr``.  An unknown level
    name falls back to INFO.
    """
    level = str(level).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    logger = logging.getLogger("shopfront")
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, "_shopfront", False)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._shopfront = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    handler.setStream(sys.stderr)
    return logger
