"""Settings file support for coloursum."""

from coloursum.config.paths import Paths
from coloursum.config.settings import ConfigManager, LoggingConfig

__all__ = ["ConfigManager", "LoggingConfig", "Paths"]
