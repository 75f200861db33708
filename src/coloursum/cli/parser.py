"""CLI argument parser for coloursum.

Defaults come from the settings file so flags only need to be given to
override it.
"""

import argparse
from argparse import Namespace

from coloursum.constants import SUPPORTED_SHELLS
from coloursum.core.options import (
    ColourChoice,
    ColourScheme,
    DigestEncoding,
    Settings,
)


def positive_int(value: str) -> int:
    """argparse type for --segment-width."""
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid positive integer: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 1:
        msg = f"must be at least 1: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


class CLIParser:
    """Command-line argument parser for coloursum."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the CLI parser.

        Args:
            settings: Settings loaded from the settings file, used as
                defaults for the rendering flags.

        """
        self.settings = settings

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:]).

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_render_options(parser)
        self._add_shell_options(parser)
        self._add_global_options(parser)
        return parser.parse_args(argv)

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="coloursum",
            description="Colourise the digests in checksum output.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Colour an md5sum or shasum listing
  md5sum *.iso | %(prog)s
  shasum -a 256 --tag release.tar.gz | %(prog)s

  # Shorter digests in base64, coloured four characters at a time
  sha256sum file | %(prog)s --encoding base64

  # Colour each byte by its value instead of its position
  sha1sum file | %(prog)s --scheme byte

  # Wrap installed checksum commands (add to ~/.bashrc)
  eval "$(%(prog)s --shell-integration bash)"
            """,
        )

    def _add_render_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the flags that control how digests are rendered."""
        parser.add_argument(
            "-e",
            "--encoding",
            type=DigestEncoding,
            choices=list(DigestEncoding),
            metavar="{" + ",".join(e.value for e in DigestEncoding) + "}",
            default=self.settings.encoding,
            help="Representation to show digests in (default: %(default)s)",
        )
        parser.add_argument(
            "-s",
            "--scheme",
            type=ColourScheme,
            choices=list(ColourScheme),
            metavar="{" + ",".join(s.value for s in ColourScheme) + "}",
            default=self.settings.scheme,
            help="How segments are coloured (default: %(default)s)",
        )
        parser.add_argument(
            "-c",
            "--colour",
            "--color",
            dest="colour",
            type=ColourChoice,
            choices=list(ColourChoice),
            metavar="{" + ",".join(c.value for c in ColourChoice) + "}",
            default=self.settings.colour,
            help="When to use colour (default: %(default)s)",
        )
        parser.add_argument(
            "-w",
            "--segment-width",
            type=positive_int,
            default=self.settings.segment_width,
            help="Characters per coloured segment "
            "(default: 2 for hex, 4 base64, 5 base85, 8 base32, 4 ecoji)",
        )

    def _add_shell_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the shell integration flags."""
        parser.add_argument(
            "--shell-integration",
            nargs="?",
            const="",
            default=None,
            choices=["", *SUPPORTED_SHELLS],
            metavar="SHELL",
            help="Print wrapper functions for checksum commands and exit "
            f"(one of {', '.join(SUPPORTED_SHELLS)}; default: from $SHELL)",
        )
        parser.add_argument(
            "--command",
            dest="commands",
            action="append",
            default=[],
            metavar="NAME",
            help="Wrap NAME instead of the installed known commands "
            "(repeatable)",
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug diagnostics on stderr",
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show coloursum version and exit",
        )
