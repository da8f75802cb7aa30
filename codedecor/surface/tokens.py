"""Build an in-memory surface from Pygments tokens.

Each token becomes a run tagged with its Pygments short CSS class (``k``,
``s2``, ``c1`` ...). Plain ``Token.Text`` has no class and stays raw text,
which the index builder later wraps into untagged runs.
"""

from __future__ import annotations

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.token import STANDARD_TYPES, Token
from pygments.util import ClassNotFound

from .memory import MemorySurface, TextLine, TextRun

TokenType = type(Token)

# Keep the source text byte-for-byte: no stripped or appended newlines.
_LEXER_OPTIONS = {"stripnl": False, "stripall": False, "ensurenl": False}


def css_class_for_token(ttype: TokenType) -> str:
    """Short class of ``ttype`` or of its closest ancestor that has one."""
    while ttype not in STANDARD_TYPES:
        ttype = ttype.parent
    return STANDARD_TYPES[ttype]


def lexer_for(source: str, filename: str | None = None, lexer_name: str | None = None) -> Lexer:
    try:
        if lexer_name:
            return get_lexer_by_name(lexer_name, **_LEXER_OPTIONS)
        if filename:
            return get_lexer_for_filename(filename, source, **_LEXER_OPTIONS)
    except ClassNotFound:
        pass
    return TextLexer(**_LEXER_OPTIONS)


def tokenize_source(
    source: str,
    filename: str | None = None,
    lexer_name: str | None = None,
    source_offset: int = 0,
    first_line: int = 1,
) -> MemorySurface:
    """Lex ``source`` into one ``TextLine`` per physical line.

    Pygments folds ``\\r\\n`` and ``\\r`` into ``\\n`` before lexing, so offsets
    refer to the newline-normalized text.
    """
    lexer = lexer_for(source, filename=filename, lexer_name=lexer_name)
    lines = [TextLine(number=first_line)]
    for ttype, value in lexer.get_tokens(source):
        css_class = css_class_for_token(ttype)
        pieces = value.split("\n")
        for idx, piece in enumerate(pieces):
            if idx > 0:
                lines.append(TextLine(number=first_line + len(lines)))
            if not piece:
                continue
            if css_class:
                lines[-1].children.append(TextRun(piece, {css_class}))
            else:
                lines[-1].children.append(piece)
    return MemorySurface(lines, source_offset=source_offset)
