"""Renderer: paints a laid-out tree row by row as styled terminal text."""

from __future__ import annotations

from boxdown.errors import RenderError
from boxdown.style import Style, corner_glyphs, horizontal_glyph, vertical_glyph
from boxdown.tree import Node, NodeKind
from boxdown.utils import display_width

_PLAIN = Style()


class SegmentBuffer:
    """Ordered ``(style, text)`` pieces of the output.

    Padding for a gap is only known once the next child has been drawn, so
    pieces can be inserted at an earlier mark.
    """

    def __init__(self) -> None:
        self._segments: list[tuple[Style, str]] = []

    def __len__(self) -> int:
        return len(self._segments)

    def push(self, style: Style, text: str) -> None:
        self._segments.append((style, text))

    def insert(self, mark: int, style: Style, text: str) -> None:
        self._segments.insert(mark, (style, text))

    def plain_text(self) -> str:
        return "".join(text for _, text in self._segments)

    def to_ansi(self) -> str:
        """Encode the pieces, merging neighbours that share attributes."""
        parts: list[str] = []
        current = _PLAIN
        run: list[str] = []
        for style, text in self._segments:
            if not text:
                continue
            if run and style.sgr() != current.sgr():
                parts.append(current.paint("".join(run)))
                run = []
            current = style
            run.append(text)
        if run:
            parts.append(current.paint("".join(run)))
        return "".join(parts)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render(root: Node) -> str:
    """Render every row of *root*, each terminated by a newline."""
    return render_segments(root).to_ansi()


def render_segments(root: Node) -> SegmentBuffer:
    out = SegmentBuffer()
    for row in range(root.size.outer_height):
        render_line(root, row, out)
        out.push(_PLAIN, "\n")
    return out


def render_line(node: Node, row: int, out: SegmentBuffer) -> tuple[int, int]:
    """Draw the part of *node* on *row*; return ``(start column, width)`` drawn."""
    if node.kind is NodeKind.BREAK:
        raise RenderError("line break marker reached the renderer")

    content, border = node.size.content, node.size.border
    if row < content.y - border.top or row >= content.y + content.h + border.bottom:
        return (0, 0)
    if row < content.y or row >= content.y + content.h:
        return _render_border_line(node, is_top=row < content.y, out=out)

    _render_border_side(node, is_left=True, out=out)
    pos = content.x
    end = content.x + content.w
    if node.kind is NodeKind.TEXT:
        text = node.text or ""
        out.push(node.style, text)
        pos += display_width(text)
    else:
        for child in node.children:
            mark = len(out)
            start, width = render_line(child, row, out)
            if width == 0:
                continue
            if start < pos:
                raise RenderError(f"{child.label()} overlaps its left sibling at row {row}")
            if start > pos:
                out.insert(mark, node.style, " " * (start - pos))
            pos = start + width
    if pos < end:
        out.push(node.style, " " * (end - pos))
    _render_border_side(node, is_left=False, out=out)
    return (content.x - border.left, node.size.outer_width)


def _render_border_line(node: Node, is_top: bool, out: SegmentBuffer) -> tuple[int, int]:
    size, style = node.size, node.style
    kind = style.border_top if is_top else style.border_bottom
    left, right = corner_glyphs(kind, top=is_top)
    line = (
        left * size.border.left
        + horizontal_glyph(kind) * size.content.w
        + right * size.border.right
    )
    out.push(style, line)
    return (size.content.x - size.border.left, size.outer_width)


def _render_border_side(node: Node, is_left: bool, out: SegmentBuffer) -> None:
    if is_left:
        width, kind = node.size.border.left, node.style.border_left
    else:
        width, kind = node.size.border.right, node.style.border_right
    if width:
        out.push(node.style, vertical_glyph(kind) * width)
