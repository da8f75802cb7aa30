"""Ordered segment storage with binary-search lookup.

The store keeps a parallel list of segment offsets so every lookup is a
``bisect`` call. Enumerations are returned as tuples, so callers may keep
using a previous result while later splits insert new segments.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable

from ..errors import InvariantViolation
from .types import UNBOUNDED_END, LineSpan, Segment, SegmentLocation


def _derive_lines(segments: list[Segment]) -> list[LineSpan]:
    """Rebuild a line table from segments alone (no empty lines are known)."""
    spans: list[LineSpan] = []
    for segment in segments:
        if spans and spans[-1].number == segment.line:
            last = spans[-1]
            spans[-1] = LineSpan(last.number, last.offset, last.length + len(segment.text))
            continue
        spans.append(
            LineSpan(
                number=segment.line,
                offset=segment.offset - (segment.column - 1),
                length=segment.column - 1 + len(segment.text),
            )
        )
    return spans


class SegmentStore:
    """Segments sorted strictly by ascending offset."""

    def __init__(
        self,
        segments: Iterable[Segment] = (),
        lines: Iterable[LineSpan] | None = None,
    ) -> None:
        self._segments: list[Segment] = list(segments)
        self._offsets: list[int] = [segment.offset for segment in self._segments]
        for previous, current in zip(self._offsets, self._offsets[1:]):
            if current <= previous:
                raise InvariantViolation(
                    f"segment offsets must be strictly increasing, got {previous} then {current}"
                )
        spans = list(lines) if lines is not None else _derive_lines(self._segments)
        self._lines: tuple[LineSpan, ...] = tuple(spans)
        self._line_offsets: list[int] = [span.offset for span in self._lines]

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    @property
    def lines(self) -> tuple[LineSpan, ...]:
        return self._lines

    @property
    def end_offset(self) -> int:
        """Offset one past the last character of the last segment."""
        if not self._segments:
            return 0
        return self._segments[-1].end

    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    def locate_entry(self, offset: int | None) -> SegmentLocation | None:
        """Return the segment whose text covers ``offset``.

        ``None`` for negative offsets, the unbounded-end sentinel, offsets past
        the last segment, and offsets sitting on an implicit line break.
        """
        if offset is UNBOUNDED_END or offset < 0 or not self._segments:
            return None
        index = bisect_right(self._offsets, offset) - 1
        if index < 0:
            return None
        segment = self._segments[index]
        if not segment.contains(offset):
            return None
        return SegmentLocation(index=index, segment=segment)

    def index_at_or_after(self, offset: int | None) -> int:
        """Index of the first segment starting at or after ``offset``.

        The unbounded-end sentinel and offsets past the last segment resolve
        to ``len(self)``.
        """
        if offset is UNBOUNDED_END:
            return len(self._segments)
        return bisect_left(self._offsets, offset)

    def select(self, start: int, end: int | None) -> tuple[Segment, ...]:
        """Snapshot of segments whose offset lies in ``[start, end)``."""
        start_index = self.index_at_or_after(start)
        end_index = self.index_at_or_after(end)
        if end_index <= start_index:
            return ()
        return tuple(self._segments[start_index:end_index])

    def line_span_for(self, offset: int) -> LineSpan | None:
        """Line whose characters or terminating line break include ``offset``."""
        index = bisect_right(self._line_offsets, offset) - 1
        if index < 0:
            return None
        span = self._lines[index]
        if offset > span.end:
            return None
        return span

    def insert_after(self, index: int, segment: Segment) -> int:
        """Insert ``segment`` directly after position ``index``.

        The position is computed by binary search and must agree with
        ``index + 1``; anything else would break offset ordering.
        """
        position = bisect_left(self._offsets, segment.offset)
        if position != index + 1:
            raise InvariantViolation(
                f"segment at offset {segment.offset} belongs at position {position}, "
                f"not after {index}"
            )
        if position < len(self._offsets) and self._offsets[position] == segment.offset:
            raise InvariantViolation(f"duplicate segment offset {segment.offset}")
        self._segments.insert(position, segment)
        self._offsets.insert(position, segment.offset)
        return position

    def text(self) -> str:
        """Reconstruct the logical document from segment texts."""
        rows: list[str] = []
        for span in self._lines:
            rows.append("".join(segment.text for segment in self.select(span.offset, span.end)))
        return "\n".join(rows)

    def check_invariants(self) -> None:
        """Scan the whole store, raising ``InvariantViolation`` on the first defect."""
        if len(self._offsets) != len(self._segments):
            raise InvariantViolation("offset table out of sync with segments")

        spans_by_number = {span.number: span for span in self._lines}
        for previous_span, span in zip(self._lines, self._lines[1:]):
            if span.offset != previous_span.end + 1:
                raise InvariantViolation(
                    f"line {span.number} starts at {span.offset}, expected {previous_span.end + 1}"
                )

        previous: Segment | None = None
        for position, segment in enumerate(self._segments):
            if self._offsets[position] != segment.offset:
                raise InvariantViolation(f"offset table stale at position {position}")
            if previous is not None:
                if segment.offset <= previous.offset:
                    raise InvariantViolation(
                        f"offsets not strictly increasing at position {position}: "
                        f"{previous.offset} then {segment.offset}"
                    )
                if segment.line == previous.line:
                    if segment.column != previous.column + len(previous.text):
                        raise InvariantViolation(
                            f"column gap on line {segment.line} at offset {segment.offset}"
                        )
                    if segment.offset != previous.end:
                        raise InvariantViolation(
                            f"offset gap on line {segment.line} at offset {segment.offset}"
                        )
            span = spans_by_number.get(segment.line)
            if span is None:
                raise InvariantViolation(f"segment at {segment.offset} names unknown line {segment.line}")
            if segment.offset != span.offset + segment.column - 1 or segment.end > span.end:
                raise InvariantViolation(
                    f"segment at {segment.offset} does not fit line {span.number} "
                    f"[{span.offset}, {span.end})"
                )
            previous = segment
