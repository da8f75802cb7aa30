"""Offset-addressed decoration of a rendered, syntax-highlighted code block.

``CodeDecorator`` indexes a rendering surface once, then lets callers tag or
untag any ``[start, end)`` range of the original text and translate offsets
to line/column positions, without knowing how the text was segmented.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .config import DecoratorOptions, load_options
from .segments import (
    UNBOUNDED_END,
    LineColumn,
    Segment,
    SegmentLocation,
    SegmentStore,
    build_segment_store,
    clear_range,
    decorate_range,
    ensure_exact_span,
    offset_to_line_column,
)
from .surface.protocols import RenderSurface

logger = logging.getLogger(__name__)


class CodeDecorator:
    """Mutable offset index layered over one rendering surface.

    Not thread-safe; one caller drives it at a time. Every method that
    returns segments returns a tuple snapshot.
    """

    def __init__(self, surface: RenderSurface, options: DecoratorOptions | None = None) -> None:
        self.surface = surface
        self.options = options if options is not None else load_options()
        self.store: SegmentStore = build_segment_store(surface)
        self._validate()
        logger.debug("decorator ready over %d segments, end offset %d", len(self.store), self.end_offset)

    def _validate(self) -> None:
        if self.options.validate_invariants:
            self.store.check_invariants()

    @property
    def end_offset(self) -> int:
        return self.store.end_offset

    def segments(self) -> tuple[Segment, ...]:
        return self.store.segments()

    def text(self) -> str:
        return self.store.text()

    def locate_entry(self, offset: int | None) -> SegmentLocation | None:
        return self.store.locate_entry(offset)

    def ensure_exact_span(self, start: int, end: int | None = UNBOUNDED_END) -> int:
        splits = ensure_exact_span(self.store, self.surface, start, end)
        if splits:
            self._validate()
        return splits

    def decorate(
        self,
        start: int,
        end: int | None,
        tags: Iterable[str],
    ) -> tuple[Segment, ...]:
        """Add ``tags`` to every segment in ``[start, end)``, splitting at the edges."""
        covered = decorate_range(self.store, self.surface, start, end, tags)
        self._validate()
        return covered

    def clear(
        self,
        start: int,
        end: int | None,
        tags: Iterable[str],
    ) -> tuple[Segment, ...]:
        """Remove ``tags`` from every segment in ``[start, end)``."""
        covered = clear_range(self.store, self.surface, start, end, tags)
        self._validate()
        return covered

    def offset_to_line_column(self, offset: int) -> LineColumn:
        return offset_to_line_column(self.store, offset)
