"""Line rendering and the stdin to stdout loop.

Every line is handled on its own: classify, encode, colourize, reassemble.
Text around the digest is copied through untouched and lines that are not
checksum output are written back verbatim.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from coloursum.core.classifier import classify_line
from coloursum.core.colourizer import colourize, paint_segments
from coloursum.core.encoder import encode_digest
from coloursum.core.options import DigestEncoding
from coloursum.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

    from coloursum.core.options import RenderOptions

logger = get_logger(__name__)


def split_terminator(raw: str) -> str:
    """Remove one trailing "\\r\\n" or "\\n" from a line."""
    if raw.endswith("\r\n"):
        return raw[:-2]
    if raw.endswith("\n"):
        return raw[:-1]
    return raw


def render_line(line: str, options: RenderOptions) -> str:
    """Render one line of checksum output.

    Args:
        line: The input line without its terminator.
        options: Run-wide rendering options.

    Returns:
        The line with its digest re-encoded and coloured as configured.
        Lines in no known format are returned unchanged.

    """
    classified = classify_line(line)
    if not classified.matched:
        return line

    encoded = encode_digest(classified.digest, options.encoding)
    if encoded.failed:
        # The original digest is shown, so segment it as the hex it was
        options = replace(options, encoding=DigestEncoding.HEX)
    segments = colourize(encoded.text, options)
    return f"{classified.prefix}{paint_segments(segments)}{classified.suffix}"


def coloursum(
    source: Iterable[str], sink: TextIO, options: RenderOptions
) -> int:
    """Render every line of source to sink.

    Lines are read and written one at a time so the input may be
    arbitrarily long or never end. I/O errors propagate to the caller.

    Args:
        source: Text stream (or any iterable of lines).
        sink: Text stream the rendered lines are written to.
        options: Run-wide rendering options.

    Returns:
        Number of lines processed.

    """
    count = 0
    for raw in source:
        sink.write(render_line(split_terminator(raw), options) + "\n")
        count += 1
    sink.flush()
    logger.debug("Rendered %d lines", count)
    return count
