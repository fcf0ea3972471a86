"""Package logging: one stream handler on ``girder_rebar``, module loggers propagate to it."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "girder_rebar"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.INFO


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(DEFAULT_LEVEL)
        logger.propagate = False
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually the module's ``__name__``; names outside
            ``girder_rebar`` are nested under it.
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: int | str) -> None:
    """Set the level for every package logger (the CLI ``--verbose`` flag)."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), DEFAULT_LEVEL)
    _package_logger().setLevel(level)
