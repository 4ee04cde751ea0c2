"""Tests for boxdown.render -- row painting, borders and ANSI encoding."""

from __future__ import annotations

import pytest

from boxdown.color import Color
from boxdown.errors import RenderError
from boxdown.layout import layout
from boxdown.render import SegmentBuffer, render, render_line, render_segments
from boxdown.style import BorderType, Style
from boxdown.tree import Node, NodeKind


def _rows(root: Node) -> list[str]:
    return render_segments(root).plain_text().split("\n")[:-1]


def _header(width: int = 10) -> Node:
    root = Node.root(width)
    header = root.add_header(1)
    border = header.size.border
    border.top = border.bottom = border.left = border.right = 1
    header.style.set_border(BorderType.THIN)
    header.add_text("Hi")
    layout(root)
    return root


# ---------------------------------------------------------------------------
# SegmentBuffer
# ---------------------------------------------------------------------------


class TestSegmentBuffer:
    def test_insert_at_mark(self) -> None:
        out = SegmentBuffer()
        out.push(Style(), "a")
        mark = len(out)
        out.push(Style(), "c")
        out.insert(mark, Style(), "b")
        assert out.plain_text() == "abc"
        assert len(out) == 3

    def test_plain_style_has_no_escapes(self) -> None:
        out = SegmentBuffer()
        out.push(Style(), "plain")
        assert out.to_ansi() == "plain"

    def test_neighbours_with_same_attributes_are_merged(self) -> None:
        bold = Style(bold=True)
        out = SegmentBuffer()
        out.push(bold, "ab")
        out.push(Style(bold=True), "cd")
        out.push(Style(), "e")
        assert out.to_ansi() == "\x1b[1mabcd\x1b[0me"

    def test_empty_pieces_are_skipped(self) -> None:
        out = SegmentBuffer()
        out.push(Style(italic=True), "")
        out.push(Style(), "x")
        assert out.to_ansi() == "x"


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class TestRenderRows:
    def test_header_box(self) -> None:
        assert _rows(_header()) == [
            "┌──┐      ",
            "│Hi│      ",
            "└──┘      ",
        ]

    def test_every_row_has_the_budget_width(self) -> None:
        root = Node.root(12)
        para = root.add_block()
        para.add_text("one two three four")
        para.size.border.bottom = 1
        layout(root)
        rows = _rows(root)
        assert len(rows) == root.size.outer_height
        assert all(len(row) == 12 for row in rows)

    def test_rule_spans_the_whole_width(self) -> None:
        root = Node.root(6)
        rule = root.add_block()
        rule.style.extend = True
        rule.style.set_border(BorderType.THIN)
        rule.size.border.bottom = 1
        layout(root)
        assert _rows(root) == ["──────"]

    def test_list_bullet_and_body_share_a_row(self) -> None:
        root = Node.root(8)
        lst = root.add_list(1)
        bullet = lst.add_bullet()
        bullet.size.border.right = 1
        bullet.add_text("1")
        lst.add_block().add_text("a")
        layout(root)
        assert _rows(root) == ["1 a     "]

    def test_rows_outside_a_node_draw_nothing(self) -> None:
        root = _header()
        out = SegmentBuffer()
        assert render_line(root, 10, out) == (0, 0)
        assert len(out) == 0

    def test_break_reaching_the_renderer_is_fatal(self) -> None:
        with pytest.raises(RenderError):
            render_line(Node(NodeKind.BREAK), 0, SegmentBuffer())

    def test_rendering_twice_gives_the_same_output(self) -> None:
        root = _header()
        assert render(root) == render(root)


# ---------------------------------------------------------------------------
# ANSI output
# ---------------------------------------------------------------------------


class TestAnsiOutput:
    def test_styled_text_is_wrapped_in_sgr_and_reset(self) -> None:
        root = Node.root(4)
        text = root.add_block().add_text("ok")
        text.style.fg = Color(196)
        text.style.bold = True
        layout(root)
        assert render(root) == "\x1b[1;38;5;196mok\x1b[0m  \n"

    def test_rows_end_with_a_plain_newline(self) -> None:
        output = render(_header())
        assert output.count("\n") == 3
        assert output.endswith("\n")


class TestOverlap:
    def test_sibling_drawn_over_its_neighbour_is_fatal(self) -> None:
        root = Node.root(10)
        line = root.add_block().inline_container()
        line.add_text("ab")
        line.add_text("cd")
        layout(root)
        line.children[1].size.content.x = 1
        with pytest.raises(RenderError):
            render(root)
