"""BSD "tag" grammar, as printed by md5(1), shasum --tag and friends.

    MD5 (./src/main.rs) = b7527e0e28c09f6f62dd2d4197d5d225
"""

from __future__ import annotations

import re

from coloursum.core.classifier.base import Span

# The filename group is greedy so names containing ")" or " = " still
# resolve to the last "(...) = " on the line.
_BSD_TAG_PATTERN = re.compile(
    r"(?P<algo>\S+)\s+\((?P<filename>.*)\)\s*=\s+(?P<digest>\S+)\s*"
)


def match_bsd_tag(line: str) -> Span | None:
    """Locate the digest in a BSD tag line.

    Args:
        line: One line of input without its terminator.

    Returns:
        The digest span, or None if the line is not in BSD tag form.

    """
    match = _BSD_TAG_PATTERN.fullmatch(line)
    if match is None:
        return None
    return match.span("digest")
