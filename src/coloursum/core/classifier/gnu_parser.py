"""GNU coreutils / Perl shasum grammar.

    b7527e0e28c09f6f62dd2d4197d5d225  ./src/main.rs
    b7527e0e28c09f6f62dd2d4197d5d225 *./src/main.rs

A leading backslash marks a line whose filename was escaped by coreutils.
"""

from __future__ import annotations

import re

from coloursum.core.classifier.base import Span

# Separator is one space plus the mode flag: " " (text) or "*" (binary)
_GNU_PATTERN = re.compile(
    r"\\?(?P<digest>[0-9A-Fa-f]+) (?P<mode>[ *])(?P<filename>.*)"
)


def match_gnu(line: str) -> Span | None:
    """Locate the digest in a GNU/Perl checksum line.

    Args:
        line: One line of input without its terminator.

    Returns:
        The digest span, or None if the line is not in GNU form.

    """
    match = _GNU_PATTERN.fullmatch(line)
    if match is None:
        return None
    return match.span("digest")
