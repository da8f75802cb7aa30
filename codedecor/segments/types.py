"""Segment datatypes used across index modules."""

from __future__ import annotations

from dataclasses import dataclass, field

# ``end`` value meaning "through the end of the document".
UNBOUNDED_END = None


@dataclass(eq=False)
class Segment:
    """One addressable run of text mapped onto a rendering-surface node.

    ``offset``/``line``/``column`` never change once created. ``text`` only
    shrinks when the segment is split, and ``tags`` is the mutable part.
    """

    offset: int
    line: int  # 1-based
    column: int  # 1-based
    text: str
    tags: set[str] = field(default_factory=set)
    node: object = field(default=None, repr=False)

    @property
    def end(self) -> int:
        """Offset one past this segment's last character."""
        return self.offset + len(self.text)

    def contains(self, offset: int) -> bool:
        return self.offset <= offset < self.end


@dataclass(frozen=True)
class SegmentLocation:
    """Result of a successful lookup: position in the store plus the segment."""

    index: int
    segment: Segment


@dataclass(frozen=True)
class LineColumn:
    line: int  # 1-based
    column: int  # 1-based


@dataclass(frozen=True)
class LineSpan:
    """Offset layout of one rendered line, recorded at build time."""

    number: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Offset of the implicit line break that terminates the line."""
        return self.offset + self.length
