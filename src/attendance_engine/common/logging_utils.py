"""Logging setup shared by the engine modules.

Modules log through ``logging.getLogger(__name__)``; the host application
decides where records go. ``configure_logging`` is a convenience for scripts
and tests that have no logging configuration of their own.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "attendance_engine"

_handler: Optional[logging.Handler] = None


def get_handler() -> Optional[logging.Handler]:
    """Console handler installed by ``configure_logging``, if any."""
    return _handler


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger
