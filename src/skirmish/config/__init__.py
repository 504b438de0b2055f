"""Configuration module using Pydantic Settings.

Usage:
    from skirmish.config import SkirmishSettings, configure_logging

    configure_logging(SkirmishSettings(log_level="DEBUG"))
"""

from skirmish.config.logs import configure_logging
from skirmish.config.settings import SkirmishSettings

__all__ = [
    "SkirmishSettings",
    "configure_logging",
]
