"""
Logging utilities for the Xion invoice client.

All package loggers live under the ``xion_invoice`` namespace. The handler
and level are set once on that namespace logger, so the client, the contract
backends and the UI share one format and one LOG_LEVEL switch.
"""

import functools
import logging
import os
from pathlib import Path

ROOT_LOGGER = "xion_invoice"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@functools.cache
def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    set_level(os.getenv("LOG_LEVEL", "INFO"))
    return root


def set_level(level: str | int) -> None:
    """Set the level of every package logger. Unknown names fall back to INFO."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.getLogger(ROOT_LOGGER).setLevel(level)


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: Logger name or __file__ path. A path becomes
            ``xion_invoice.<module stem>``; any other name outside the
            namespace is placed under it.

    Returns:
        logging.Logger that propagates to the configured package logger.
    """
    _root()
    if "/" in name or "\\" in name:
        name = Path(name).stem
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
