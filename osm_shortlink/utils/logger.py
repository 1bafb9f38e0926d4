"""
Logging configuration for the osm_shortlink package.

Importing this module sets the package logger level from
settings.LOG_LEVEL. Output handlers are left to the calling application;
the package only installs a NullHandler.
"""

import logging

from osm_shortlink.core.config import settings

logger = logging.getLogger("osm_shortlink")


def configure_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name, e.g. "DEBUG" or "WARNING"

    Returns:
        The configured package logger
    """
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    logger.setLevel(level.upper())
    return logger


configure_logging()
