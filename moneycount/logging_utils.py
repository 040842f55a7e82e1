"""Mini README: Application-wide logging helpers for Moneycount.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - one-shot helper adjusting the global level.

Usage:
    Modules call ``get_logger(__name__)`` at import time. Configuration of
    the root handler happens once per process so reloading the web app in
    development does not stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach a single stream handler with a readable formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
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
    """Return a named logger, configuring the root logger on first use."""

    configure_root_logger()
    return logging.getLogger(name)
