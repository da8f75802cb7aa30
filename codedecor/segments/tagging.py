"""Add and remove style tags over boundary-aligned offset ranges."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..surface.protocols import RenderSurface
from .splitter import ensure_exact_span
from .store import SegmentStore
from .types import UNBOUNDED_END, Segment

logger = logging.getLogger(__name__)


def _tag_set(tags: Iterable[str]) -> set[str]:
    # A bare string is iterable too and would turn into one tag per character.
    if isinstance(tags, str):
        raise TypeError(f"tags must be a collection of strings, not the string {tags!r}")
    return set(tags)


def _is_empty_range(store: SegmentStore, start: int, end: int | None) -> bool:
    if end is not UNBOUNDED_END and start >= end:
        return True
    return start < 0 or start >= store.end_offset


def aligned_segments(
    store: SegmentStore,
    surface: RenderSurface,
    start: int,
    end: int | None,
) -> tuple[Segment, ...]:
    """Split at the range edges and return the whole segments inside ``[start, end)``.

    An ``end`` past the last segment, or ``UNBOUNDED_END``, runs through the
    final segment. Empty and out-of-document ranges return ``()`` untouched.
    """
    if _is_empty_range(store, start, end):
        return ()
    ensure_exact_span(store, surface, start, end)
    return store.select(start, end)


def decorate_range(
    store: SegmentStore,
    surface: RenderSurface,
    start: int,
    end: int | None,
    tags: Iterable[str],
) -> tuple[Segment, ...]:
    tag_set = _tag_set(tags)
    if not tag_set:
        return ()
    covered = aligned_segments(store, surface, start, end)
    for segment in covered:
        missing = tag_set - segment.tags
        if not missing:
            continue
        segment.tags |= missing
        surface.add_tags(segment.node, sorted(missing))
    logger.debug("decorated %d segments in [%s, %s) with %s", len(covered), start, end, sorted(tag_set))
    return covered


def clear_range(
    store: SegmentStore,
    surface: RenderSurface,
    start: int,
    end: int | None,
    tags: Iterable[str],
) -> tuple[Segment, ...]:
    """Remove ``tags`` over ``[start, end)``; splits made on the way stay in place."""
    tag_set = _tag_set(tags)
    if not tag_set:
        return ()
    covered = aligned_segments(store, surface, start, end)
    for segment in covered:
        present = tag_set & segment.tags
        if not present:
            continue
        segment.tags -= present
        surface.remove_tags(segment.node, sorted(present))
    logger.debug("cleared %s from %d segments in [%s, %s)", sorted(tag_set), len(covered), start, end)
    return covered
