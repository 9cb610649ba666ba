"""Logging setup for the driveacl logger namespace."""

import logging

from driveacl.config import Settings, get_settings

LOGGER_NAME = "driveacl"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    Debug mode forces DEBUG regardless of ``log_level``. Handlers are left to
    the application; a NullHandler keeps library use silent by default.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
