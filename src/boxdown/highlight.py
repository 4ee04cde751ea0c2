"""Syntax highlighting service used for fenced code blocks.

The builder only relies on the small protocol below: resolve a language
hint to a highlighter, then split each line into styled sub-ranges whose
concatenation is exactly the input line. ``PygmentsHighlighting`` is the
default implementation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from pygments import lex
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

DEFAULT_THEME = "monokai"


@dataclass(frozen=True)
class HighlightStyle:
    """Style of one highlighted range: 24-bit foreground plus font flags."""

    foreground: tuple[int, int, int] | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False


class Highlighter(Protocol):
    def highlight(self, line: str) -> list[tuple[HighlightStyle, str]]: ...


class HighlightingService(Protocol):
    def resolve(self, language: str) -> Highlighter | None: ...


# ---------------------------------------------------------------------------
# Pygments implementation
# ---------------------------------------------------------------------------


def _parse_hex(color: str | None) -> tuple[int, int, int] | None:
    if not color:
        return None
    color = color.lstrip("#")
    if len(color) == 3:
        color = "".join(ch * 2 for ch in color)
    if len(color) != 6:
        return None
    return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))


class PygmentsHighlighter:
    """Highlights single lines with one pygments lexer and style."""

    def __init__(self, lexer: Lexer, style: StyleMeta) -> None:
        self._lexer = lexer
        self._style = style
        self._cache: dict[object, HighlightStyle] = {}

    def _style_for(self, ttype: object) -> HighlightStyle:
        cached = self._cache.get(ttype)
        if cached is None:
            token_style = self._style.style_for_token(ttype)
            cached = HighlightStyle(
                foreground=_parse_hex(token_style.get("color")),
                bold=bool(token_style.get("bold")),
                italic=bool(token_style.get("italic")),
                underline=bool(token_style.get("underline")),
            )
            self._cache[ttype] = cached
        return cached

    def highlight(self, line: str) -> list[tuple[HighlightStyle, str]]:
        ranges: list[tuple[HighlightStyle, str]] = []
        for ttype, value in lex(line, self._lexer):
            if not value:
                continue
            style = self._style_for(ttype)
            if ranges and ranges[-1][0] == style:
                ranges[-1] = (style, ranges[-1][1] + value)
            else:
                ranges.append((style, value))
        return ranges


class PygmentsHighlighting:
    """Resolves code block language hints to pygments lexers."""

    def __init__(self, theme: str = DEFAULT_THEME) -> None:
        try:
            self._style = get_style_by_name(theme)
        except ClassNotFound as e:
            raise ValueError(f"Unknown highlighting theme: {theme}") from e
        self.theme = theme

    def _find_lexer(self, language: str) -> Lexer | None:
        options = {"stripnl": False, "ensurenl": False}
        try:
            return get_lexer_by_name(language, **options)
        except ClassNotFound:
            pass
        try:
            return get_lexer_for_filename(f"code.{language}", **options)
        except ClassNotFound:
            return None

    def resolve(self, language: str) -> PygmentsHighlighter | None:
        words = language.split()
        if not words:
            return None
        language = words[0]
        lexer = self._find_lexer(language)
        if lexer is None:
            logger.debug("no lexer for language hint %r", language)
            return None
        return PygmentsHighlighter(lexer, self._style)
