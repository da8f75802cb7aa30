"""Align segment boundaries with arbitrary offsets by splitting runs."""

from __future__ import annotations

import logging

from ..errors import InvariantViolation
from ..surface.protocols import RenderSurface
from .store import SegmentStore
from .types import UNBOUNDED_END, Segment, SegmentLocation

logger = logging.getLogger(__name__)


def split_segment(
    store: SegmentStore,
    surface: RenderSurface,
    location: SegmentLocation,
    offset: int,
) -> Segment:
    """Split the located segment at ``offset`` and return the new trailing half.

    The original keeps the leading text; the new segment inherits a copy of
    its tags and is placed immediately after it, on the surface and in the store.
    """
    entry = location.segment
    cut = offset - entry.offset
    if not 0 < cut < len(entry.text):
        raise InvariantViolation(
            f"cannot split segment [{entry.offset}, {entry.end}) at {offset}"
        )

    before_text = entry.text[:cut]
    after_text = entry.text[cut:]
    tags = set(entry.tags)

    surface.set_run_text(entry.node, before_text)
    node = surface.insert_run_after(entry.node, after_text, sorted(tags))
    entry.text = before_text

    trailing = Segment(
        offset=offset,
        line=entry.line,
        column=entry.column + cut,
        text=after_text,
        tags=tags,
        node=node,
    )
    store.insert_after(location.index, trailing)
    logger.debug("split segment at %d on line %d column %d", offset, entry.line, trailing.column)
    return trailing


def _split_at(store: SegmentStore, surface: RenderSurface, offset: int | None) -> bool:
    if offset is UNBOUNDED_END:
        return False
    location = store.locate_entry(offset)
    if location is None or location.segment.offset == offset:
        return False
    split_segment(store, surface, location, offset)
    return True


def ensure_exact_span(
    store: SegmentStore,
    surface: RenderSurface,
    start: int,
    end: int | None,
) -> int:
    """Make segments start exactly at ``start`` and at ``end``.

    Boundaries that fall outside every segment (past the document, on an
    implicit line break, or the unbounded-end sentinel) are left alone.
    Returns how many splits were made; a repeated call returns 0.
    """
    splits = 0
    if _split_at(store, surface, start):
        splits += 1
    if _split_at(store, surface, end):
        splits += 1
    return splits
