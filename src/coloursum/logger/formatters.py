"""Logging formatters for console output.

Console diagnostics share stderr with the user's terminal, so level names
are coloured to set them apart from piped checksum output.
"""

import logging

from coloursum.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for log levels.

    The level name is coloured only for the duration of format() and
    restored afterwards, so other handlers see the original record.

    Colors:
        DEBUG: Cyan
        INFO: Green
        WARNING: Yellow
        ERROR: Red
        CRITICAL: Magenta

    """

    def format(self, record: logging.LogRecord) -> str:
        r"""Format log record with a coloured level name.

        Args:
            record: The log record to format

        Returns:
            Formatted message, e.g. "\033[33mWARNING\033[0m - coloursum - ..."

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)
