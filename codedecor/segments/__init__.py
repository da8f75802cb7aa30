"""Offset index over rendered text segments.

- ``store``: ordered segments and binary-search lookup
- ``builder``: initial index from a rendering surface
- ``splitter``: boundary alignment by splitting runs
- ``tagging``: tag add/remove over aligned ranges
- ``positions``: offset to line/column translation
"""

from __future__ import annotations

from .builder import build_segment_store
from .positions import offset_to_line_column
from .splitter import ensure_exact_span, split_segment
from .store import SegmentStore
from .tagging import aligned_segments, clear_range, decorate_range
from .types import UNBOUNDED_END, LineColumn, LineSpan, Segment, SegmentLocation

__all__ = [
    "UNBOUNDED_END",
    "LineColumn",
    "LineSpan",
    "Segment",
    "SegmentLocation",
    "SegmentStore",
    "aligned_segments",
    "build_segment_store",
    "clear_range",
    "decorate_range",
    "ensure_exact_span",
    "offset_to_line_column",
    "split_segment",
]
