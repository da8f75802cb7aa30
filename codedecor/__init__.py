"""Decorate arbitrary offset ranges of a syntax-highlighted code block.

The ``__init__`` module is a facade so callers can import from ``codedecor``
without depending on internal layout.
"""

from __future__ import annotations

from .config import DecoratorOptions, load_options
from .decorator import CodeDecorator
from .errors import (
    CodeDecorError,
    InvariantViolation,
    LineNumberError,
    OffsetError,
    SurfaceError,
)
from .segments import UNBOUNDED_END, LineColumn, Segment, SegmentLocation, SegmentStore

__all__ = [
    "UNBOUNDED_END",
    "CodeDecorError",
    "CodeDecorator",
    "DecoratorOptions",
    "InvariantViolation",
    "LineColumn",
    "LineNumberError",
    "OffsetError",
    "Segment",
    "SegmentLocation",
    "SegmentStore",
    "SurfaceError",
    "load_options",
]
