"""Logging bootstrap shared by every module of the package."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "wordcount"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Return the package logger, attaching a stderr handler on first use.

    Repeated calls only adjust the level.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    if level is None:
        from ..config import get_settings

        level = get_settings().log_level
    logger.setLevel(level.upper())

    if not any(getattr(handler, "_wordcount", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._wordcount = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging"]
