"""Types shared by the line grammars."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Half-open [start, end) character range of a digest within a line
Span = tuple[int, int]


class LineFormat(Enum):
    """Checksum output grammar a line was recognised as."""

    BSD_TAG = "bsd-tag"
    GNU = "gnu"
    UNMATCHED = "unmatched"


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line of input together with where its digest is, if anywhere.

    Attributes:
        text: The line, without its terminator.
        format: Grammar the line matched.
        span: Digest position, None when the line is UNMATCHED.

    """

    text: str
    format: LineFormat = LineFormat.UNMATCHED
    span: Span | None = None

    @property
    def matched(self) -> bool:
        return self.span is not None

    @property
    def prefix(self) -> str:
        """Text before the digest (the whole line when unmatched)."""
        if self.span is None:
            return self.text
        return self.text[: self.span[0]]

    @property
    def digest(self) -> str:
        if self.span is None:
            return ""
        start, end = self.span
        return self.text[start:end]

    @property
    def suffix(self) -> str:
        if self.span is None:
            return ""
        return self.text[self.span[1] :]
