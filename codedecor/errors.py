"""Exception hierarchy shared by the index and the surface adapters.

Out-of-range offsets are not errors here: lookups answer ``None`` and the
range decorator treats them as no-ops. Only caller mistakes that cannot be
given a meaning, and corrupt input or state, raise.
"""

from __future__ import annotations


class CodeDecorError(Exception):
    """Base class for every error raised by ``codedecor``."""


class SurfaceError(CodeDecorError):
    """The rendering surface cannot be indexed as provided."""


class LineNumberError(SurfaceError, ValueError):
    """A line identifier does not resolve to a positive line number."""

    def __init__(self, identifier: object, reason: str = "not a positive integer") -> None:
        self.identifier = identifier
        super().__init__(f"cannot resolve line number from {identifier!r}: {reason}")


class OffsetError(CodeDecorError, ValueError):
    """An offset cannot be translated into a line/column position."""


class InvariantViolation(CodeDecorError, AssertionError):
    """The segment store no longer satisfies its ordering/layout invariants."""
