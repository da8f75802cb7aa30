"""Build the initial segment store from a rendering surface."""

from __future__ import annotations

import logging

from ..errors import LineNumberError, SurfaceError
from ..surface.protocols import RenderSurface
from .store import SegmentStore
from .types import LineSpan, Segment

logger = logging.getLogger(__name__)


def _checked_line_number(value: object) -> int:
    # bool is an int subclass; True must not become line 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise LineNumberError(value)
    if value < 1:
        raise LineNumberError(value, "line numbers are 1-based")
    return value


def _checked_bias(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SurfaceError(f"source offset must be an integer, got {value!r}")
    if value < 0:
        raise SurfaceError(f"source offset must be non-negative, got {value}")
    return value


def build_segment_store(surface: RenderSurface) -> SegmentStore:
    """Normalize ``surface`` and index every non-empty run.

    The offset cursor starts at ``-source_offset`` so public offsets line up
    with the full document. Each line is followed by one implicit line break.
    Zero-length runs stay on the surface but are not indexed.
    """
    bias = _checked_bias(surface.source_offset())
    offset = -bias
    segments: list[Segment] = []
    spans: list[LineSpan] = []
    skipped_empty = 0

    for line in surface.lines():
        number = _checked_line_number(surface.line_number(line))
        line_start = offset
        column = 1
        for run in surface.normalize_line(line):
            text = surface.run_text(run)
            if not text:
                skipped_empty += 1
                continue
            segments.append(
                Segment(
                    offset=offset,
                    line=number,
                    column=column,
                    text=text,
                    tags=set(surface.run_tags(run)),
                    node=run,
                )
            )
            offset += len(text)
            column += len(text)
        spans.append(LineSpan(number=number, offset=line_start, length=offset - line_start))
        offset += 1

    logger.debug(
        "indexed %d segments over %d lines (bias=%d, empty runs skipped=%d)",
        len(segments),
        len(spans),
        bias,
        skipped_empty,
    )
    return SegmentStore(segments, spans)
