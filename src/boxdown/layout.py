"""Layout engine: fits the document tree into a column budget.

Every layout step returns one of three outcomes:

* ``Normal`` -- the node fits, nothing else to do;
* ``CutHere(continuation)`` -- the node kept what fits, the caller must
  insert ``continuation`` right after it and move the remaining siblings
  to a following line;
* ``Reject`` -- nothing fit, the caller must retry the node unchanged at
  the start of the next line.

Geometry is written in place. Splitting inserts new sibling nodes and
``Break`` markers are removed as they are consumed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from boxdown.errors import LayoutError
from boxdown.tree import BoxSize, Node, NodeKind
from boxdown.utils import display_width, wrap_text

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Layout outcomes
# ---------------------------------------------------------------------------


@dataclass
class Normal:
    pass


@dataclass
class CutHere:
    continuation: Node


@dataclass
class Reject:
    pass


LayoutResult: TypeAlias = Normal | CutHere | Reject

NORMAL = Normal()
REJECT = Reject()


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------


@dataclass
class Cursor:
    """Drawing position inside an enclosing container.

    ``line_x`` is where the current visual line starts; a text run standing
    there can no longer move to a fresh line and must be cut mid-word.
    """

    x: int
    y: int
    container: BoxSize
    line_x: int = 0

    @classmethod
    def inside(cls, node: Node, line_x: int | None = None) -> Cursor:
        content = node.size.content
        return cls(
            x=content.x,
            y=content.y,
            container=node.size.copy(),
            line_x=content.x if line_x is None else line_x,
        )

    @property
    def remaining(self) -> int:
        """Columns left between the cursor and the container's right edge."""
        content = self.container.content
        return content.w - (self.x - content.x)

    def __str__(self) -> str:
        return f"[{self.x} {self.y}] {self.container}"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def layout(root: Node) -> None:
    """Lay out *root* (a block whose content width is the column budget)."""
    budget = root.size.content.w
    cursor = Cursor(x=0, y=0, container=root.size.copy())
    layout_node(root, cursor)
    root.size.content.w = budget
    logger.debug("layout done: %d columns, %d rows", budget, root.size.outer_height)


def layout_node(node: Node, cursor: Cursor) -> LayoutResult:
    match node.kind:
        case NodeKind.BLOCK | NodeKind.LIST_BULLET | NodeKind.HEADER:
            return _layout_block(node, cursor)
        case NodeKind.INLINE_CONTAINER:
            return _layout_inline_container(node, cursor)
        case NodeKind.LIST:
            return _layout_list(node, cursor)
        case NodeKind.TEXT | NodeKind.INLINE:
            return _layout_inline(node, cursor)
        case NodeKind.BREAK:
            raise LayoutError("a line break marker cannot be laid out on its own")
        case _:
            raise LayoutError(f"unimplemented layout for {node.label()}")


def _width_inside(available: int, node: Node) -> int:
    """Content width left once the node's own borders are taken off (at least 1)."""
    border = node.size.border
    if available > border.left + border.right:
        return available - border.left - border.right
    return 1


def _place(node: Node, cursor: Cursor) -> None:
    content, border = node.size.content, node.size.border
    content.x = cursor.x + border.left
    content.y = cursor.y + border.top


def _layout_stacked_child(parent: Node, index: int, cursor: Cursor) -> None:
    child = parent.children[index]
    match layout_node(child, cursor):
        case Normal():
            pass
        case CutHere(continuation):
            parent.children.insert(index + 1, continuation)
        case Reject():
            raise LayoutError(f"{child.label()} rejected inside {parent.label()}")


# ---------------------------------------------------------------------------
# Block-level layout
# ---------------------------------------------------------------------------


def _layout_block(node: Node, cursor: Cursor) -> LayoutResult:
    _place(node, cursor)
    content = node.size.content
    content.h = 0
    content.w = _width_inside(cursor.remaining, node)

    subcursor = Cursor.inside(node)
    max_width = 0
    i = 0
    while i < len(node.children):
        if node.children[i].kind is NodeKind.BREAK:
            del node.children[i]
            continue
        _layout_stacked_child(node, i, subcursor)
        child = node.children[i]
        content.h += child.size.outer_height
        max_width = max(max_width, child.size.outer_width)
        i += 1

    if not node.style.extend:
        content.w = max_width

    if node.kind is NodeKind.LIST_BULLET:
        # bullets sit beside their item body
        cursor.x += node.size.outer_width
    else:
        cursor.x = cursor.container.content.x
        cursor.y += node.size.outer_height
    return NORMAL


def _layout_list(node: Node, cursor: Cursor) -> LayoutResult:
    """Stack list items; an item is as tall as the taller of its bullet and body."""
    _place(node, cursor)
    content = node.size.content
    content.w = _width_inside(cursor.container.content.w, node)
    content.h = 0

    subcursor = Cursor.inside(node)
    bullet: Node | None = None
    item_y = subcursor.y
    i = 0
    while i < len(node.children):
        child = node.children[i]
        if child.kind not in (NodeKind.LIST_BULLET, NodeKind.BLOCK):
            raise LayoutError(f"can't lay out {child.label()} in a list")
        if bullet is None:
            item_y = subcursor.y
        _layout_stacked_child(node, i, subcursor)
        i += 1
        if child.kind is NodeKind.LIST_BULLET:
            bullet = child
            continue

        item_height = child.size.outer_height
        if bullet is not None:
            item_height = max(item_height, bullet.size.outer_height)
        subcursor.x = content.x
        subcursor.y = item_y + item_height
        content.h += item_height
        bullet = None

    cursor.y += node.size.outer_height
    return NORMAL


# ---------------------------------------------------------------------------
# Inline layout
# ---------------------------------------------------------------------------


def _layout_inline_container(node: Node, cursor: Cursor) -> LayoutResult:
    """Lay out one visual line; overflow becomes a following line container."""
    _place(node, cursor)
    content = node.size.content
    content.w = _width_inside(cursor.container.content.w, node)
    content.h = 1
    result = _layout_inline_children(node, line_x=content.x, allow_reject=False)
    cursor.y += node.size.outer_height
    return result


def _layout_inline(node: Node, cursor: Cursor) -> LayoutResult:
    _place(node, cursor)
    content, border = node.size.content, node.size.border
    content.h = 1
    content.w = max(cursor.remaining - border.left - border.right, 0)

    if node.kind is NodeKind.TEXT:
        result = _layout_text(node, at_line_start=cursor.x == cursor.line_x)
    else:
        result = _layout_inline_children(node, line_x=cursor.line_x, allow_reject=True)

    if isinstance(result, Reject):
        # retried from scratch on the next line
        content.w = 0
        return result
    cursor.x += node.size.outer_width
    return result


def _layout_text(node: Node, at_line_start: bool) -> LayoutResult:
    content = node.size.content
    text = node.text or ""
    available = content.w
    width = display_width(text)

    if width <= available:
        content.w = width
        return NORMAL
    if available == 0:
        logger.debug("rejecting %s: no room left", node.label())
        return REJECT

    wrapped = wrap_text(text, available, at_line_start)
    if wrapped is None:
        logger.debug("rejecting %s: does not fit in %d columns", node.label(), available)
        return REJECT

    head, tail = wrapped
    node.text = head
    content.w = display_width(head)
    if not tail:
        return NORMAL
    logger.debug("splitting text at column %d: %r | %r", content.w, head, tail)
    return CutHere(node.continuation(tail))


def _layout_inline_children(node: Node, line_x: int, allow_reject: bool) -> LayoutResult:
    """Shared by line containers and inline spans.

    Children that do not fit on this line are moved, together with every
    sibling after them, into a new node of the same kind which is reported
    back as the continuation.
    """
    result: LayoutResult = NORMAL
    subcursor = Cursor.inside(node, line_x=line_x)
    i = 0
    while i < len(node.children):
        child = node.children[i]
        if child.kind is NodeKind.BREAK:
            del node.children[i]
            result = CutHere(node.cut_from(i))
            break

        match layout_node(child, subcursor):
            case Normal():
                pass
            case CutHere(continuation):
                node.children.insert(i + 1, continuation)
                result = CutHere(node.cut_from(i + 1))
                break
            case Reject():
                if i > 0:
                    result = CutHere(node.cut_from(i))
                elif allow_reject:
                    result = REJECT
                else:
                    raise LayoutError(f"can't reject the first {child.label()} of a line")
                break
        i += 1

    node.size.content.w = subcursor.x - node.size.content.x
    return result
