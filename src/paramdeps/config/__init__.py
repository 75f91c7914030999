"""Configuration layer — settings and logging setup."""

from paramdeps.config.logging import configure_logging
from paramdeps.config.settings import ValidateSettings, get_settings

__all__ = ["ValidateSettings", "configure_logging", "get_settings"]
