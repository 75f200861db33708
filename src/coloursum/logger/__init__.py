"""Logging utilities for coloursum.

Diagnostics go to stderr (and optionally a rotating log file) through a
QueueHandler/QueueListener pair; stdout is reserved for rendered lines.

Usage:
    >>> from coloursum.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Processing %s", value)  # Use %-style formatting

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from coloursum.logger.formatters import ColoredConsoleFormatter
from coloursum.logger.logger import (
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from coloursum.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
]
