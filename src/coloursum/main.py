"""Main CLI entry point for coloursum.

Keeps the process-level concerns (exit status, interrupts, last-resort
error reporting) out of the runner.
"""

import sys

from coloursum.cli import CLIRunner
from coloursum.constants import EXIT_INTERRUPTED, EXIT_IO_ERROR
from coloursum.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run the CLI application and exit with its status.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    """
    try:
        status = CLIRunner().run(argv)
    except KeyboardInterrupt:
        logger.debug("Interrupted by user")
        status = EXIT_INTERRUPTED
    except Exception:
        logger.exception("Unexpected error")
        status = EXIT_IO_ERROR
    finally:
        flush_all_handlers()
    sys.exit(status)


if __name__ == "__main__":
    main()
