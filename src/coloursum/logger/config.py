"""Bootstrap settings for the logging system.

The logger is initialised before the settings file has been read, so it
starts from fixed defaults. The CLI runner reconfigures it once the
settings file is loaded.
"""

import os
from pathlib import Path

from coloursum.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)


def default_log_path() -> Path:
    """Return the log file path, honouring COLOURSUM_LOG_DIR.

    Returns:
        $COLOURSUM_LOG_DIR/coloursum.log when the variable is set,
        ~/.config/coloursum/logs/coloursum.log otherwise.

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return (
        Path.home()
        / CONFIG_DIR_NAME
        / DEFAULT_CONFIG_SUBDIR
        / "logs"
        / LOG_FILE_NAME
    )


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_log_path()
