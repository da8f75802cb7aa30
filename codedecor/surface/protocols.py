"""Capability interface the index needs from a rendering surface.

Lines and runs are opaque handles owned by the surface; the index only keeps
non-owning references and talks to them through these methods.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

LineT = TypeVar("LineT")
RunT = TypeVar("RunT")


class RenderSurface(Protocol[LineT, RunT]):
    def source_offset(self) -> int:
        """Characters of the full document that precede the rendered excerpt."""
        ...

    def lines(self) -> Sequence[LineT]:
        ...

    def line_number(self, line: LineT) -> int:
        """1-based line number; raise ``LineNumberError`` when unresolvable."""
        ...

    def normalize_line(self, line: LineT) -> Sequence[RunT]:
        """Wrap raw-text children into untagged runs and return the line's runs in order."""
        ...

    def run_text(self, run: RunT) -> str:
        ...

    def run_tags(self, run: RunT) -> Iterable[str]:
        ...

    def set_run_text(self, run: RunT, text: str) -> None:
        ...

    def insert_run_after(self, run: RunT, text: str, tags: Iterable[str]) -> RunT:
        """Create a sibling run right after ``run`` and return its handle."""
        ...

    def add_tags(self, run: RunT, tags: Iterable[str]) -> None:
        ...

    def remove_tags(self, run: RunT, tags: Iterable[str]) -> None:
        ...
