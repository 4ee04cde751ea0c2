"""Tests for boxdown.style -- attributes, SGR encoding and border glyphs."""

from __future__ import annotations

from boxdown.color import Color, TermColor
from boxdown.style import (
    RESET,
    BorderType,
    Style,
    TextAlign,
    corner_glyphs,
    horizontal_glyph,
    vertical_glyph,
)


class TestSgr:
    def test_plain_style_has_no_sequence(self) -> None:
        assert Style().sgr() == ""
        assert Style().paint("hello") == "hello"

    def test_bold_with_foreground(self) -> None:
        style = Style(bold=True, fg=Color.from_dark(TermColor.PURPLE))
        assert style.sgr() == "\x1b[1;38;5;5m"

    def test_all_attributes_in_order(self) -> None:
        style = Style(
            bold=True,
            italic=True,
            underline=True,
            strikethrough=True,
            fg=Color(1),
            bg=Color(0),
        )
        assert style.sgr() == "\x1b[1;3;4;9;38;5;1;48;5;0m"

    def test_paint_wraps_text_and_resets(self) -> None:
        assert Style(italic=True).paint("x") == f"\x1b[3mx{RESET}"

    def test_borders_and_layout_flags_do_not_affect_encoding(self) -> None:
        style = Style(extend=True, code=True, align=TextAlign.RIGHT)
        style.set_border(BorderType.DOUBLE)
        assert style.sgr() == ""


class TestStyleValue:
    def test_defaults(self) -> None:
        style = Style()
        assert style.align is TextAlign.LEFT
        assert style.border_top is BorderType.EMPTY
        assert not style.extend

    def test_set_border_assigns_every_edge(self) -> None:
        style = Style()
        style.set_border(BorderType.BOLD)
        assert style.border_top is BorderType.BOLD
        assert style.border_bottom is BorderType.BOLD
        assert style.border_left is BorderType.BOLD
        assert style.border_right is BorderType.BOLD

    def test_copy_is_independent(self) -> None:
        style = Style(bold=True)
        other = style.copy()
        other.bold = False
        other.fg = Color(3)
        assert style.bold
        assert not style.fg.is_set


class TestGlyphs:
    def test_horizontal(self) -> None:
        assert horizontal_glyph(BorderType.EMPTY) == " "
        assert horizontal_glyph(BorderType.DASH) == "╌"
        assert horizontal_glyph(BorderType.THIN) == "─"
        assert horizontal_glyph(BorderType.DOUBLE) == "═"
        assert horizontal_glyph(BorderType.BOLD) == "━"

    def test_vertical(self) -> None:
        assert vertical_glyph(BorderType.EMPTY) == " "
        assert vertical_glyph(BorderType.DASH) == "╎"
        assert vertical_glyph(BorderType.THIN) == "│"
        assert vertical_glyph(BorderType.DOUBLE) == "║"
        assert vertical_glyph(BorderType.BOLD) == "┃"

    def test_corners(self) -> None:
        assert corner_glyphs(BorderType.THIN, top=True) == ("┌", "┐")
        assert corner_glyphs(BorderType.THIN, top=False) == ("└", "┘")
        assert corner_glyphs(BorderType.DOUBLE, top=False) == ("╚", "╝")
        assert corner_glyphs(BorderType.EMPTY, top=True) == (" ", " ")
