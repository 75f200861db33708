"""Run-wide rendering configuration.

Settings is what the user asked for (possibly "auto" colour). RenderOptions
is what the pipeline uses: the same values with colour resolved against the
output stream. Both are frozen; one RenderOptions is built at start-up and
passed to every per-line call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Console

from coloursum.constants import (
    DEFAULT_COLOUR,
    DEFAULT_ENCODING,
    DEFAULT_PALETTE,
    DEFAULT_SCHEME,
    SEGMENT_WIDTHS,
)

if TYPE_CHECKING:
    from typing import TextIO


class DigestEncoding(str, Enum):
    """Representation the digest is rendered in."""

    HEX = "hex"
    BASE32 = "base32"
    BASE64 = "base64"
    BASE85 = "base85"
    ECOJI = "ecoji"

    def __str__(self) -> str:
        return self.value

    @property
    def segment_width(self) -> int:
        """Characters per segment that cover whole source bytes."""
        return SEGMENT_WIDTHS[self.value]


class ColourScheme(str, Enum):
    """How segments are mapped to colours."""

    PALETTE = "palette"
    BYTE = "byte"
    DIGITS = "digits"

    def __str__(self) -> str:
        return self.value


class ColourChoice(str, Enum):
    """User's colour override."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


def stream_supports_colour(stream: TextIO) -> bool:
    """Decide whether ANSI colour should be written to stream.

    Delegates terminal detection to rich, which honours NO_COLOR,
    FORCE_COLOR and TERM=dumb.

    Args:
        stream: The output stream

    Returns:
        True if colour escapes are appropriate

    """
    console = Console(file=stream)
    return console.color_system is not None and not console.no_color


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Resolved configuration shared by every line of a run."""

    colour: bool = True
    encoding: DigestEncoding = DigestEncoding.HEX
    scheme: ColourScheme = ColourScheme.PALETTE
    palette: tuple[int, ...] = DEFAULT_PALETTE
    segment_width: int | None = None

    @property
    def width(self) -> int:
        """Segment width, defaulting to the encoding's natural width."""
        return self.segment_width or self.encoding.segment_width


@dataclass(frozen=True, slots=True)
class Settings:
    """User-facing configuration from the settings file and CLI flags."""

    encoding: DigestEncoding = DigestEncoding(DEFAULT_ENCODING)
    scheme: ColourScheme = ColourScheme(DEFAULT_SCHEME)
    colour: ColourChoice = ColourChoice(DEFAULT_COLOUR)
    segment_width: int | None = None
    palette: tuple[int, ...] = DEFAULT_PALETTE

    def resolve(self, stream: TextIO) -> RenderOptions:
        """Build RenderOptions for output written to stream.

        Args:
            stream: The stream rendered lines will be written to

        Returns:
            Immutable options with colour resolved to a bool

        """
        if self.colour is ColourChoice.ALWAYS:
            colour = True
        elif self.colour is ColourChoice.NEVER:
            colour = False
        else:
            colour = stream_supports_colour(stream)

        return RenderOptions(
            colour=colour,
            encoding=self.encoding,
            scheme=self.scheme,
            palette=self.palette,
            segment_width=self.segment_width,
        )

    def to_cli_args(self) -> list[str]:
        """Return the command-line flags that reproduce these settings.

        Only values that differ from the built-in defaults are emitted, so
        a wrapper stays short and still follows later settings changes.
        The palette is not a CLI flag and is left to the settings file.
        """
        args: list[str] = []
        if self.encoding is not DigestEncoding(DEFAULT_ENCODING):
            args.extend(["--encoding", self.encoding.value])
        if self.scheme is not ColourScheme(DEFAULT_SCHEME):
            args.extend(["--scheme", self.scheme.value])
        if self.colour is not ColourChoice(DEFAULT_COLOUR):
            args.extend(["--colour", self.colour.value])
        if self.segment_width is not None:
            args.extend(["--segment-width", str(self.segment_width)])
        return args
