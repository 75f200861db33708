"""CLI runner for coloursum.

Loads settings, parses arguments, configures logging and then either
prints shell integration or filters stdin to stdout.
"""

from __future__ import annotations

import io
import os
import sys
from argparse import Namespace
from typing import TYPE_CHECKING

from coloursum import __version__
from coloursum.cli.parser import CLIParser
from coloursum.config import ConfigManager
from coloursum.config.settings import LoggingConfig
from coloursum.constants import (
    EXIT_IO_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
)
from coloursum.core.options import Settings
from coloursum.core.renderer import coloursum
from coloursum.exceptions import ConfigurationError, ShellIntegrationError
from coloursum.logger import get_logger, setup_logging
from coloursum.logger.config import default_log_path
from coloursum.shell import (
    available_commands,
    detect_shell,
    generate_shell_integration,
)

if TYPE_CHECKING:
    from typing import TextIO

logger = get_logger(__name__)


def _as_utf8(stream: TextIO, newline: str) -> TextIO:
    """Switch a standard stream to UTF-8 without newline translation.

    surrogateescape carries undecodable filename bytes through unchanged.
    Reading with newline="\\n" splits on LF only, so a lone "\\r" stays
    inside its line and split_terminator removes any "\\r\\n" ending.
    Writing with newline="" emits "\\n" as-is.
    """
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(
            encoding="utf-8", errors="surrogateescape", newline=newline
        )
    return stream


class CLIRunner:
    """CLI orchestrator."""

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config_manager: Settings source (defaults to the user's file)
            stdin: Text stream to read (defaults to sys.stdin as UTF-8)
            stdout: Text stream to write (defaults to sys.stdout as UTF-8)

        """
        self.config_manager = config_manager or ConfigManager()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        if self._stdin is None:
            self._stdin = _as_utf8(sys.stdin, newline="\n")
        return self._stdin

    @property
    def stdout(self) -> TextIO:
        if self._stdout is None:
            self._stdout = _as_utf8(sys.stdout, newline="")
        return self._stdout

    def run(self, argv: list[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Process exit status.

        """
        try:
            settings = self.config_manager.load_settings()
            logging_config = self.config_manager.load_logging_config()
        except ConfigurationError as e:
            logger.error("%s", e)
            return EXIT_USAGE_ERROR

        args = CLIParser(settings).parse_args(argv)

        if args.version:
            self.stdout.write(f"{__version__}\n")
            self.stdout.flush()
            return EXIT_OK

        try:
            self._setup_logging(logging_config, verbose=args.verbose)
        except ConfigurationError as e:
            logger.error("%s", e)
            return EXIT_USAGE_ERROR

        settings = Settings(
            encoding=args.encoding,
            scheme=args.scheme,
            colour=args.colour,
            segment_width=args.segment_width,
            palette=settings.palette,
        )

        if args.shell_integration is not None:
            return self._print_shell_integration(args, settings)
        return self._filter(settings)

    def _setup_logging(
        self,
        logging_config: LoggingConfig,
        verbose: bool,  # noqa: FBT001
    ) -> None:
        """Apply levels from the settings file, or DEBUG with --verbose."""
        setup_logging(
            console_level="DEBUG" if verbose else logging_config.console_level,
            file_level=logging_config.file_level,
            log_file=default_log_path(),
            enable_file_logging=logging_config.file_enabled,
            force=True,
        )

    def _print_shell_integration(
        self, args: Namespace, settings: Settings
    ) -> int:
        shell = args.shell_integration or detect_shell()
        commands = args.commands or available_commands()
        if not commands:
            logger.warning("No known checksum commands found on PATH")

        try:
            script = generate_shell_integration(commands, settings, shell)
        except ShellIntegrationError as e:
            logger.error("%s", e)
            return EXIT_USAGE_ERROR

        self.stdout.write(script)
        self.stdout.flush()
        return EXIT_OK

    def _filter(self, settings: Settings) -> int:
        """Colourise stdin to stdout.

        Returns:
            EXIT_OK at end of input, EXIT_IO_ERROR if reading or writing
            fails.

        """
        options = settings.resolve(self.stdout)
        logger.debug("Rendering with %s", options)

        try:
            coloursum(self.stdin, self.stdout, options)
        except BrokenPipeError:
            # Downstream closed early (e.g. `| head`). Point stdout at
            # devnull so the interpreter's final flush cannot raise again.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            return EXIT_IO_ERROR
        except OSError as e:
            logger.error("I/O error: %s", e)
            return EXIT_IO_ERROR

        return EXIT_OK
