"""Line classification.

Each grammar is tried in order and the first match wins. BSD tag form is
tried first: its algorithm token is never pure hex followed by the GNU
separator, so the order only matters for odd inputs.
"""

from __future__ import annotations

from collections.abc import Callable

from coloursum.core.classifier.base import ClassifiedLine, LineFormat, Span
from coloursum.core.classifier.bsd_parser import match_bsd_tag
from coloursum.core.classifier.gnu_parser import match_gnu

_GRAMMARS: tuple[tuple[LineFormat, Callable[[str], Span | None]], ...] = (
    (LineFormat.BSD_TAG, match_bsd_tag),
    (LineFormat.GNU, match_gnu),
)


def classify_line(line: str) -> ClassifiedLine:
    """Work out which checksum grammar line follows and where its digest is.

    Args:
        line: One line of input without its terminator.

    Returns:
        ClassifiedLine; format is UNMATCHED when no grammar applies.

    """
    if not line.strip():
        return ClassifiedLine(line)

    for line_format, matcher in _GRAMMARS:
        span = matcher(line)
        if span is not None and span[1] > span[0]:
            return ClassifiedLine(line, line_format, span)

    return ClassifiedLine(line)


__all__ = [
    "ClassifiedLine",
    "LineFormat",
    "Span",
    "classify_line",
    "match_bsd_tag",
    "match_gnu",
]
