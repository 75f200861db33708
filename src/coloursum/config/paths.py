"""Path helpers for coloursum configuration."""

import os
from pathlib import Path

from coloursum.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)


class Paths:
    """Application paths."""

    HOME_DIR = Path.home()
    CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def config_dir(cls) -> Path:
        """Return the config directory, honouring COLOURSUM_CONFIG_DIR."""
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return Path(env_dir).expanduser()
        return cls.CONFIG_DIR

    @classmethod
    def settings_file(cls) -> Path:
        return cls.config_dir() / CONFIG_FILE_NAME
