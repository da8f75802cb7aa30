"""Pandoc/Quarto HTML code blocks as a rendering surface.

Pandoc renders a highlighted block as::

    <div class="sourceCode" id="cb1" data-source-offset="12">
      <pre class="sourceCode python"><code class="sourceCode python">
        <span id="cb1-1"><a href="#cb1-1" ...></a><span class="im">import</span> os</span>
        ...

Each ``code > span`` is a line whose number is the ``id`` suffix; its
``<span>`` children are tagged runs (tags are CSS classes) and bare text
nodes are raw text. Other elements, such as the empty line anchors, carry no
text and are not runs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from ..errors import LineNumberError, SurfaceError

SOURCE_OFFSET_ATTR = "data-source-offset"


def parse_line_id(identifier: object) -> int:
    """``"cb1-12"`` -> ``12``; anything without a positive numeric suffix is an error."""
    if not isinstance(identifier, str) or not identifier:
        raise LineNumberError(identifier, "missing line id")
    _prefix, _sep, suffix = identifier.rpartition("-")
    if not (suffix.isascii() and suffix.isdigit()):
        raise LineNumberError(identifier, "id has no numeric suffix")
    number = int(suffix)
    if number < 1:
        raise LineNumberError(identifier, "line numbers are 1-based")
    return number


def _classes(tag: Tag) -> list[str]:
    value = tag.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


class PandocHtmlSurface:
    """``RenderSurface`` over the ``<code>`` element of a Pandoc code block."""

    def __init__(self, soup: BeautifulSoup, code: Tag) -> None:
        self._soup = soup
        self.code = code

    @classmethod
    def from_markup(cls, markup: str, block_id: str | None = None) -> PandocHtmlSurface:
        """Parse ``markup`` and wrap the first code block (or the one inside ``#block_id``)."""
        soup = BeautifulSoup(markup, "html.parser")
        scope: Tag | None = soup
        if block_id is not None:
            scope = soup.find(id=block_id)
            if not isinstance(scope, Tag):
                raise SurfaceError(f"no element with id {block_id!r}")
        code = scope.find("code")
        if not isinstance(code, Tag):
            raise SurfaceError("markup contains no <code> element")
        return cls(soup, code)

    def to_html(self) -> str:
        return str(self._soup)

    def source_offset(self) -> int:
        for ancestor in [self.code, *self.code.parents]:
            if not isinstance(ancestor, Tag):
                continue
            raw = ancestor.get(SOURCE_OFFSET_ATTR)
            if raw is None:
                continue
            text = str(raw).strip()
            if not (text.isascii() and text.isdigit()):
                raise SurfaceError(f"{SOURCE_OFFSET_ATTR} must be a non-negative integer, got {raw!r}")
            return int(text)
        return 0

    def lines(self) -> Sequence[Tag]:
        return tuple(self.code.find_all("span", recursive=False))

    def line_number(self, line: Tag) -> int:
        return parse_line_id(line.get("id"))

    def normalize_line(self, line: Tag) -> Sequence[Tag]:
        runs: list[Tag] = []
        for child in list(line.children):
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                wrapper = self._soup.new_tag("span")
                wrapper.string = str(child)
                child.replace_with(wrapper)
                runs.append(wrapper)
                continue
            if isinstance(child, Tag) and child.name == "span":
                runs.append(child)
        return tuple(runs)

    def run_text(self, run: Tag) -> str:
        return run.get_text()

    def run_tags(self, run: Tag) -> Iterable[str]:
        return tuple(_classes(run))

    def set_run_text(self, run: Tag, text: str) -> None:
        run.string = text

    def insert_run_after(self, run: Tag, text: str, tags: Iterable[str]) -> Tag:
        new_run = self._soup.new_tag("span")
        classes = list(tags)
        if classes:
            new_run["class"] = classes
        new_run.string = text
        run.insert_after(new_run)
        return new_run

    def add_tags(self, run: Tag, tags: Iterable[str]) -> None:
        classes = _classes(run)
        for tag in tags:
            if tag not in classes:
                classes.append(tag)
        if classes:
            run["class"] = classes

    def remove_tags(self, run: Tag, tags: Iterable[str]) -> None:
        removed = set(tags)
        classes = [css_class for css_class in _classes(run) if css_class not in removed]
        if classes:
            run["class"] = classes
        elif "class" in run.attrs:
            del run["class"]
