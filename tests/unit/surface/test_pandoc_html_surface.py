"""Tests for Pandoc HTML code blocks as a rendering surface."""

from __future__ import annotations

import unittest

from bs4 import BeautifulSoup

from codedecor import CodeDecorator, DecoratorOptions
from codedecor.errors import LineNumberError, SurfaceError
from codedecor.surface import PandocHtmlSurface, parse_line_id

PANDOC_BLOCK = (
    '<div class="sourceCode" id="cb1"{offset}><pre class="sourceCode python">'
    '<code class="sourceCode python">'
    '<span id="cb1-1"><a href="#cb1-1" aria-hidden="true" tabindex="-1"></a>'
    '<span class="im">import</span> os</span>\n'
    '<span id="cb1-2"><a href="#cb1-2" aria-hidden="true" tabindex="-1"></a>'
    '<span class="bu">print</span>(os.getcwd())</span>'
    "</code></pre></div>"
)


def block(offset_attr: str = "") -> str:
    return PANDOC_BLOCK.format(offset=offset_attr)


def line_runs(html: str, line_id: str) -> list[tuple[str, list[str] | None]]:
    line = BeautifulSoup(html, "html.parser").find(id=line_id)
    return [(span.get_text(), span.get("class")) for span in line.find_all("span", recursive=False)]


class ParseLineIdTests(unittest.TestCase):
    def test_numeric_suffix_is_the_line_number(self) -> None:
        self.assertEqual(parse_line_id("cb1-12"), 12)
        self.assertEqual(parse_line_id("cb12-3"), 3)

    def test_malformed_ids_raise(self) -> None:
        for bad in (None, "", "cb1-x", "cb1-", "cb1-0", ["cb1-1"]):
            with self.subTest(identifier=bad):
                with self.assertRaises(LineNumberError):
                    parse_line_id(bad)


class PandocHtmlSurfaceTests(unittest.TestCase):
    def test_index_covers_code_text_and_ignores_anchors(self) -> None:
        decorator = CodeDecorator(PandocHtmlSurface.from_markup(block()), DecoratorOptions())

        self.assertEqual(decorator.text(), "import os\nprint(os.getcwd())")
        self.assertEqual(
            [(s.offset, s.line, s.column, s.text, s.tags) for s in decorator.segments()],
            [
                (0, 1, 1, "import", {"im"}),
                (6, 1, 7, " os", set()),
                (10, 2, 1, "print", {"bu"}),
                (15, 2, 6, "(os.getcwd())", set()),
            ],
        )

    def test_decorate_splits_spans_and_adds_classes(self) -> None:
        surface = PandocHtmlSurface.from_markup(block())
        decorator = CodeDecorator(surface, DecoratorOptions())

        decorator.decorate(7, 12, ["hl"])
        html = surface.to_html()

        self.assertEqual(line_runs(html, "cb1-1"), [("import", ["im"]), (" ", None), ("os", ["hl"])])
        self.assertEqual(line_runs(html, "cb1-2"), [("pr", ["bu", "hl"]), ("int", ["bu"]), ("(os.getcwd())", None)])

    def test_clear_removes_classes_and_drops_empty_attribute(self) -> None:
        surface = PandocHtmlSurface.from_markup(block())
        decorator = CodeDecorator(surface, DecoratorOptions())
        decorator.decorate(6, 9, ["hl"])

        decorator.clear(0, 9, ["hl", "im"])

        self.assertEqual(line_runs(surface.to_html(), "cb1-1"), [("import", None), (" os", None)])

    def test_source_offset_attribute_biases_offsets(self) -> None:
        decorator = CodeDecorator(
            PandocHtmlSurface.from_markup(block(' data-source-offset="10"')),
            DecoratorOptions(),
        )

        self.assertEqual(decorator.segments()[2].offset, 0)
        self.assertEqual(decorator.offset_to_line_column(0).line, 2)

    def test_non_numeric_source_offset_is_rejected(self) -> None:
        surface = PandocHtmlSurface.from_markup(block(' data-source-offset="ten"'))

        with self.assertRaises(SurfaceError):
            CodeDecorator(surface, DecoratorOptions())

    def test_malformed_line_id_fails_the_build(self) -> None:
        surface = PandocHtmlSurface.from_markup(block().replace('id="cb1-2"', 'id="cb1-two"'))

        with self.assertRaises(LineNumberError):
            CodeDecorator(surface, DecoratorOptions())

    def test_block_id_selects_code_element(self) -> None:
        markup = block() + block().replace("cb1", "cb2").replace("os", "re")

        surface = PandocHtmlSurface.from_markup(markup, block_id="cb2")

        self.assertEqual(CodeDecorator(surface, DecoratorOptions()).text(), "import re\nprint(re.getcwd())")

    def test_markup_without_code_element_is_rejected(self) -> None:
        with self.assertRaises(SurfaceError):
            PandocHtmlSurface.from_markup("<p>no code here</p>")
        with self.assertRaises(SurfaceError):
            PandocHtmlSurface.from_markup(block(), block_id="missing")


if __name__ == "__main__":
    unittest.main()
