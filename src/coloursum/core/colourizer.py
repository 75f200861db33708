"""Digest segmentation and colour assignment.

A digest is cut into fixed-width segments left to right and each segment
gets a colour. Colours depend only on the segment (its index, or its value
for the byte scheme), so the same digest is coloured identically on every
run and equal positions of two digests can be compared at a glance.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from rich.color import Color, ColorSystem
from rich.style import Style

from coloursum.constants import DIGIT_COLOUR, HEX_DIGITS
from coloursum.core.options import ColourScheme

if TYPE_CHECKING:
    from collections.abc import Iterable

    from coloursum.core.options import RenderOptions

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True, slots=True)
class Segment:
    """A slice of a digest and the xterm-256 colour to show it in."""

    text: str
    colour: int | None = None


@lru_cache(maxsize=256)
def _style_for(colour: int) -> Style:
    return Style(color=Color.from_ansi(colour))


def ansi_paint(text: str, colour: int | None) -> str:
    """Wrap text in the escape sequence for an xterm-256 colour.

    Args:
        text: Text to colour.
        colour: xterm colour number 0-255, or None to leave text as-is.

    Returns:
        e.g. "\\x1b[38;5;183mb7\\x1b[0m" for ("b7", 183).

    """
    if colour is None or not text:
        return text
    return _style_for(colour).render(text, color_system=ColorSystem.EIGHT_BIT)


def strip_ansi(text: str) -> str:
    """Remove SGR colour sequences from text."""
    return _SGR_PATTERN.sub("", text)


def split_segments(digest: str, width: int) -> list[str]:
    """Cut digest into width-sized chunks; the last may be shorter.

    Raises:
        ValueError: If width is not positive.

    """
    if width < 1:
        msg = f"Segment width must be positive, got {width}"
        raise ValueError(msg)
    return [digest[i : i + width] for i in range(0, len(digest), width)]


def _byte_colour(text: str, index: int, palette: tuple[int, ...]) -> int:
    # Colour by value so equal bytes look equal; non-hex keeps the palette
    if all(char in HEX_DIGITS for char in text):
        return int(text, 16) % 256
    return palette[index % len(palette)]


def colourize(digest: str, options: RenderOptions) -> tuple[Segment, ...]:
    """Split a digest into coloured segments.

    Args:
        digest: The digest text (already re-encoded, if requested).
        options: Run-wide rendering options.

    Returns:
        Segments whose texts concatenate back to digest. In plain mode the
        whole digest is one uncoloured segment.

    """
    if not digest:
        return ()
    if not options.colour:
        return (Segment(digest),)

    if options.scheme is ColourScheme.DIGITS:
        return tuple(
            Segment(char, DIGIT_COLOUR if char in string.digits else None)
            for char in digest
        )

    palette = options.palette
    chunks = split_segments(digest, options.width)
    if options.scheme is ColourScheme.BYTE:
        return tuple(
            Segment(chunk, _byte_colour(chunk, index, palette))
            for index, chunk in enumerate(chunks)
        )
    return tuple(
        Segment(chunk, palette[index % len(palette)])
        for index, chunk in enumerate(chunks)
    )


def paint_segments(segments: Iterable[Segment]) -> str:
    """Join segments into one string with their colour escapes."""
    return "".join(ansi_paint(seg.text, seg.colour) for seg in segments)
