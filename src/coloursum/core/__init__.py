"""Checksum line colourising engine."""

from coloursum.core.classifier import ClassifiedLine, LineFormat, classify_line
from coloursum.core.colourizer import (
    Segment,
    ansi_paint,
    colourize,
    paint_segments,
    strip_ansi,
)
from coloursum.core.encoder import EncodedDigest, decode_hex, encode_digest
from coloursum.core.options import (
    ColourChoice,
    ColourScheme,
    DigestEncoding,
    RenderOptions,
    Settings,
)
from coloursum.core.renderer import coloursum, render_line, split_terminator

__all__ = [
    "ClassifiedLine",
    "ColourChoice",
    "ColourScheme",
    "DigestEncoding",
    "EncodedDigest",
    "LineFormat",
    "RenderOptions",
    "Segment",
    "Settings",
    "ansi_paint",
    "classify_line",
    "colourize",
    "coloursum",
    "decode_hex",
    "encode_digest",
    "paint_segments",
    "render_line",
    "split_terminator",
    "strip_ansi",
]
