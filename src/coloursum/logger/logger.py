"""Public API of the logging system.

- setup_logging(): configure the root logger (once, or again with force)
- get_logger(): module-level logger accessor
- flush_all_handlers(): drain the queue and flush handlers
"""

import atexit
import logging
from pathlib import Path

from coloursum.logger.config import load_log_settings
from coloursum.logger.handlers import ROOT_LOGGER_NAME, setup_root_logger
from coloursum.logger.state import get_state


def flush_all_handlers() -> None:
    """Wait for queued records to be handled, then flush every handler."""
    get_state().flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    with state.lock:
        state.stop()


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
    force: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root "coloursum" logger is initialised on first use. Passing
    force=True tears the existing handlers down and rebuilds them, which
    is how the CLI applies levels read from the settings file.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level
        log_file: Path to log file
        enable_file_logging: Whether to write a log file
        force: Rebuild handlers even if already initialised

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if force:
            state.stop()

        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initialising the logging system if needed.

    Example:
        >>> from coloursum.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Classified line %d as %s", number, line_format)

    """
    return setup_logging(name=name)

