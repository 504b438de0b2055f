"""Logging setup for the ``skirmish`` package logger."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from skirmish.config.settings import SkirmishSettings

LOGGER_NAME = "skirmish"

_installed_handler: logging.Handler | None = None


def configure_logging(
    settings: SkirmishSettings | None = None, stream: TextIO | None = None
) -> logging.Logger:
    """Attach a single stream handler (stdout by default) to the package logger.

    The package logger stops propagating, so a root handler configured by the
    host process never repeats strike lines. Calling this again replaces the
    handler installed by the previous call.

    Returns:
        The configured ``skirmish`` logger.
    """
    global _installed_handler

    settings = settings or SkirmishSettings()
    package_logger = logging.getLogger(LOGGER_NAME)
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(settings.log_format))
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    package_logger.propagate = False
    _installed_handler = handler
    return package_logger
