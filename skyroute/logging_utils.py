"""Mini README: Application-wide logging helpers for skyroute.

Structure:
    * get_logger - factory returning module loggers with shared formatting.
    * configure_root_logger - install the single stream handler and level.

Usage:
    Modules create ``LOGGER = get_logger(__name__)`` at import time. The root
    handler is installed exactly once so repeated imports (tests, uvicorn
    reloads) never stack duplicate handlers. The CLI calls
    ``configure_root_logger`` first with the configured level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a readable, timestamped formatter."""

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    if _LOGGER_INITIALISED:
        logging.getLogger().setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
