"""Translate document offsets into 1-based line/column positions."""

from __future__ import annotations

from ..errors import OffsetError
from .store import SegmentStore
from .types import LineColumn


def offset_to_line_column(store: SegmentStore, offset: int) -> LineColumn:
    """Return the ``(line, column)`` of ``offset``.

    Offsets on an implicit line break (or on an empty line, trailing ones
    included) resolve through the line table. Offsets past the document end
    saturate at one past the last character of the last segment's line.
    Negative offsets raise ``OffsetError``.
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise OffsetError(f"offset must be an integer, got {offset!r}")
    if offset < 0:
        raise OffsetError(f"offset must be non-negative, got {offset}")
    if len(store) == 0:
        raise OffsetError("cannot translate offsets in an empty document")

    location = store.locate_entry(offset)
    if location is not None:
        entry = location.segment
        return LineColumn(line=entry.line, column=entry.column + (offset - entry.offset))

    # The final line has no terminating line break, so its end is the document end.
    lines = store.lines
    if lines and offset < lines[-1].end:
        span = store.line_span_for(offset)
        if span is not None:
            return LineColumn(line=span.number, column=offset - span.offset + 1)

    last = store[len(store) - 1]
    if offset >= last.end:
        return LineColumn(
            line=last.line,
            column=last.column + min(len(last.text), offset - last.offset),
        )
    raise OffsetError(f"offset {offset} is not covered by any indexed line")
