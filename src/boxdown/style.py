"""Visual attributes of a box and their terminal (SGR) encoding."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from boxdown.color import Color

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------

RESET = "\x1b[0m"

_BOLD = "1"
_ITALIC = "3"
_UNDERLINE = "4"
_STRIKETHROUGH = "9"


class BorderType(Enum):
    EMPTY = "empty"
    DASH = "dash"
    THIN = "thin"
    DOUBLE = "double"
    BOLD = "bold"


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# (horizontal, vertical, top-left, top-right, bottom-left, bottom-right)
_GLYPHS: dict[BorderType, tuple[str, str, str, str, str, str]] = {
    BorderType.EMPTY: (" ", " ", " ", " ", " ", " "),
    BorderType.DASH: ("╌", "╎", "┌", "┐", "└", "┘"),
    BorderType.THIN: ("─", "│", "┌", "┐", "└", "┘"),
    BorderType.DOUBLE: ("═", "║", "╔", "╗", "╚", "╝"),
    BorderType.BOLD: ("━", "┃", "┏", "┓", "┗", "┛"),
}


def horizontal_glyph(kind: BorderType) -> str:
    return _GLYPHS[kind][0]


def vertical_glyph(kind: BorderType) -> str:
    return _GLYPHS[kind][1]


def corner_glyphs(kind: BorderType, top: bool) -> tuple[str, str]:
    """Return the (left, right) corners of a horizontal border of *kind*."""
    glyphs = _GLYPHS[kind]
    return (glyphs[2], glyphs[3]) if top else (glyphs[4], glyphs[5])


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


@dataclass
class Style:
    """Colors, emphasis flags, alignment and per-edge border types of a box.

    ``extend`` makes a block keep the full width offered by its parent
    instead of shrinking to its widest child.
    """

    bg: Color = field(default_factory=Color)
    fg: Color = field(default_factory=Color)
    bold: bool = False
    underline: bool = False
    strikethrough: bool = False
    italic: bool = False
    code: bool = False
    extend: bool = False
    align: TextAlign = TextAlign.LEFT
    border_top: BorderType = BorderType.EMPTY
    border_bottom: BorderType = BorderType.EMPTY
    border_left: BorderType = BorderType.EMPTY
    border_right: BorderType = BorderType.EMPTY

    def copy(self) -> Style:
        return copy.copy(self)

    def set_border(self, kind: BorderType) -> None:
        self.border_top = kind
        self.border_bottom = kind
        self.border_left = kind
        self.border_right = kind

    def sgr(self) -> str:
        """Encode the attributes as one SGR escape sequence ("" if plain)."""
        params: list[str] = []
        if self.bold:
            params.append(_BOLD)
        if self.italic:
            params.append(_ITALIC)
        if self.underline:
            params.append(_UNDERLINE)
        if self.strikethrough:
            params.append(_STRIKETHROUGH)
        if self.fg.is_set:
            params.append(f"38;5;{self.fg.index}")
        if self.bg.is_set:
            params.append(f"48;5;{self.bg.index}")
        if not params:
            return ""
        return f"\x1b[{';'.join(params)}m"

    def paint(self, text: str) -> str:
        prefix = self.sgr()
        if not prefix or not text:
            return text
        return f"{prefix}{text}{RESET}"
