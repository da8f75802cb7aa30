"""Rendering-surface adapters.

The index core only depends on ``protocols.RenderSurface``; the modules here
implement it for concrete technologies:

- ``memory``: plain Python lines and runs
- ``tokens``: Pygments token streams into a memory surface
- ``html``: Pandoc HTML code blocks through BeautifulSoup
- ``ansi``: terminal rendering of a memory surface
"""

from __future__ import annotations

from .ansi import DEFAULT_ANSI_STYLES, render_ansi
from .html import PandocHtmlSurface, parse_line_id
from .memory import MemorySurface, TextLine, TextRun
from .protocols import RenderSurface
from .tokens import tokenize_source

__all__ = [
    "DEFAULT_ANSI_STYLES",
    "MemorySurface",
    "PandocHtmlSurface",
    "RenderSurface",
    "TextLine",
    "TextRun",
    "parse_line_id",
    "render_ansi",
    "tokenize_source",
]
