"""Plain-Python rendering surface: lines holding raw strings and tagged runs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class TextRun:
    """Mutable inline run; identity matters, so equality is by object."""

    text: str
    tags: set[str] = field(default_factory=set)


@dataclass(eq=False)
class TextLine:
    """One rendered line; children are raw ``str`` or ``TextRun``."""

    number: object
    children: list[str | TextRun] = field(default_factory=list)

    def plain_text(self) -> str:
        return "".join(child if isinstance(child, str) else child.text for child in self.children)


class MemorySurface:
    """In-memory rendering surface implementing ``RenderSurface``."""

    def __init__(self, lines: Iterable[TextLine] = (), source_offset: int = 0) -> None:
        self._lines: list[TextLine] = list(lines)
        self._source_offset = source_offset
        # Owning line per run, so inserting a split run never scans other lines.
        self._owners: dict[TextRun, TextLine] = {
            child: line
            for line in self._lines
            for child in line.children
            if isinstance(child, TextRun)
        }

    @classmethod
    def from_text(cls, text: str, source_offset: int = 0, first_line: int = 1) -> MemorySurface:
        """One raw-text child per line; empty lines get no children."""
        lines = [
            TextLine(number=first_line + idx, children=[row] if row else [])
            for idx, row in enumerate(text.split("\n"))
        ]
        return cls(lines, source_offset=source_offset)

    def source_offset(self) -> int:
        return self._source_offset

    def lines(self) -> Sequence[TextLine]:
        return tuple(self._lines)

    def line_number(self, line: TextLine) -> int:
        # Validation of the value happens in the index builder.
        return line.number  # type: ignore[return-value]

    def normalize_line(self, line: TextLine) -> Sequence[TextRun]:
        runs: list[TextRun] = []
        for idx, child in enumerate(line.children):
            if isinstance(child, str):
                child = TextRun(child)
                line.children[idx] = child
            self._owners[child] = line
            runs.append(child)
        return tuple(runs)

    def run_text(self, run: TextRun) -> str:
        return run.text

    def run_tags(self, run: TextRun) -> Iterable[str]:
        return tuple(run.tags)

    def set_run_text(self, run: TextRun, text: str) -> None:
        run.text = text

    def insert_run_after(self, run: TextRun, text: str, tags: Iterable[str]) -> TextRun:
        line = self._owners.get(run)
        if line is None:
            raise ValueError("run does not belong to this surface")
        for idx, child in enumerate(line.children):
            if child is run:
                new_run = TextRun(text, set(tags))
                line.children.insert(idx + 1, new_run)
                self._owners[new_run] = line
                return new_run
        raise ValueError("run was removed from its line")

    def add_tags(self, run: TextRun, tags: Iterable[str]) -> None:
        run.tags.update(tags)

    def remove_tags(self, run: TextRun, tags: Iterable[str]) -> None:
        run.tags.difference_update(tags)

    def runs(self) -> tuple[TextRun, ...]:
        return tuple(
            child for line in self._lines for child in line.children if isinstance(child, TextRun)
        )

    def plain_text(self) -> str:
        return "\n".join(line.plain_text() for line in self._lines)
