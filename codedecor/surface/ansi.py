"""Render an in-memory surface to ANSI-styled terminal text.

Tags map to SGR parameter strings. Pygments short classes fall back to their
family letter, so ``s2`` uses the ``s`` style unless it has its own entry.
"""

from __future__ import annotations

from collections.abc import Mapping

from .memory import MemorySurface, TextRun

RESET = "\033[0m"
SEARCH_HIT_SGR = "7;1"
SELECTION_BG_SGR = "48;2;58;92;188"

DEFAULT_ANSI_STYLES: dict[str, str] = {
    "hl": SEARCH_HIT_SGR,
    "sel": SELECTION_BG_SGR,
    "k": "1;34",
    "n": "",
    "nb": "35",
    "nf": "36",
    "nc": "1;36",
    "s": "32",
    "m": "36",
    "c": "90",
    "o": "33",
    "err": "31",
}


def sgr_for_tags(tags: set[str], styles: Mapping[str, str]) -> str:
    params: list[str] = []
    for tag in sorted(tags):
        sgr = styles.get(tag)
        if sgr is None and tag:
            sgr = styles.get(tag[0])
        if sgr:
            params.append(sgr)
    return ";".join(params)


def render_run(run: TextRun, styles: Mapping[str, str]) -> str:
    sgr = sgr_for_tags(run.tags, styles)
    if not sgr:
        return run.text
    return f"\033[{sgr}m{run.text}{RESET}"


def render_ansi(surface: MemorySurface, styles: Mapping[str, str] | None = None) -> str:
    """Render ``surface`` line by line; ``styles`` entries override the defaults."""
    merged = dict(DEFAULT_ANSI_STYLES)
    if styles:
        merged.update(styles)
    rows: list[str] = []
    for line in surface.lines():
        out: list[str] = []
        for child in line.children:
            if isinstance(child, str):
                out.append(child)
            else:
                out.append(render_run(child, merged))
        rows.append("".join(out))
    return "\n".join(rows)
