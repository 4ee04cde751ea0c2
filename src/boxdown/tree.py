"""Document tree: a box hierarchy of nodes with geometry, style and children.

Nodes are created by the builder with zeroed geometry. Layout fills the
geometry in place (and may add continuation siblings); rendering only reads.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from boxdown.style import Style


class NodeKind(Enum):
    TEXT = "text"
    BREAK = "break"
    INLINE_CONTAINER = "inline_container"
    INLINE = "inline"
    BLOCK = "block"
    HEADER = "header"
    LIST = "list"
    LIST_BULLET = "list_bullet"
    TABLE = "table"
    TABLE_COLUMN = "table_column"
    TABLE_ITEM = "table_item"
    IMAGE = "image"


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


@dataclass
class Rect:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class Edges:
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


@dataclass
class BoxSize:
    """Content rectangle plus the width of each border edge."""

    content: Rect = field(default_factory=Rect)
    border: Edges = field(default_factory=Edges)

    @property
    def outer_width(self) -> int:
        return self.content.w + self.border.left + self.border.right

    @property
    def outer_height(self) -> int:
        return self.content.h + self.border.top + self.border.bottom

    def copy(self) -> BoxSize:
        return copy.deepcopy(self)

    def __str__(self) -> str:
        c, b = self.content, self.border
        return f"[{c.x} {c.y} +{c.w} +{c.h}] [+{b.top} +{b.left} -{b.bottom} -{b.right}]"


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------


@dataclass
class Node:
    """One box of the document.

    The kind-specific payload lives in ``text`` (TEXT), ``level`` (HEADER)
    and ``start`` (LIST; ``None`` for an unordered list).
    """

    kind: NodeKind
    size: BoxSize = field(default_factory=BoxSize)
    style: Style = field(default_factory=Style)
    children: list[Node] = field(default_factory=list)
    text: str | None = None
    level: int | None = None
    start: int | None = None

    # -- constructors -------------------------------------------------------

    @classmethod
    def block(cls) -> Node:
        return cls(NodeKind.BLOCK)

    @classmethod
    def root(cls, width: int) -> Node:
        """A block whose content width is the column budget of the document."""
        node = cls.block()
        node.size.content.w = width
        return node

    def _child(self, kind: NodeKind, **payload: object) -> Node:
        child = Node(kind, style=self.style.copy(), **payload)
        self.children.append(child)
        return child

    # -- building -----------------------------------------------------------

    def swallow(self, node: Node) -> None:
        self.children.append(node)

    def inline_container(self) -> Node:
        """Return the line that inline content added here should go to.

        Inline nodes are their own container; block-level nodes reuse a
        trailing line container or open a new one.
        """
        if self.kind in (NodeKind.INLINE, NodeKind.INLINE_CONTAINER):
            return self
        if self.children and self.children[-1].kind is NodeKind.INLINE_CONTAINER:
            return self.children[-1]
        return self._child(NodeKind.INLINE_CONTAINER)

    def add_text(self, text: str) -> Node:
        return self.inline_container()._child(NodeKind.TEXT, text=text)

    def add_inline(self) -> Node:
        return self.inline_container()._child(NodeKind.INLINE)

    def add_block(self) -> Node:
        return self._child(NodeKind.BLOCK)

    def add_header(self, level: int) -> Node:
        return self._child(NodeKind.HEADER, level=level)

    def add_list(self, start: int | None) -> Node:
        return self._child(NodeKind.LIST, start=start)

    def add_bullet(self) -> Node:
        return self._child(NodeKind.LIST_BULLET)

    def add_break(self) -> Node:
        return self._child(NodeKind.BREAK)

    # -- layout support -----------------------------------------------------

    def cut_from(self, index: int) -> Node:
        """Move ``children[index:]`` into a new sibling shaped like this node."""
        rest = self.children[index:]
        del self.children[index:]
        return Node(
            self.kind,
            size=self.size.copy(),
            style=self.style.copy(),
            children=rest,
            text=self.text,
            level=self.level,
            start=self.start,
        )

    def continuation(self, text: str) -> Node:
        """A text sibling carrying *text* with this node's geometry and style."""
        return Node(NodeKind.TEXT, size=self.size.copy(), style=self.style.copy(), text=text)

    # -- inspection ---------------------------------------------------------

    def walk(self) -> Iterator[Node]:
        """Yield this node and all its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def label(self) -> str:
        match self.kind:
            case NodeKind.TEXT:
                return f"Text({self.text!r})"
            case NodeKind.HEADER:
                return f"Header({self.level})"
            case NodeKind.LIST:
                return f"List({self.start})"
            case _:
                return self.kind.name.title().replace("_", "")

    def dump(self, indent: int = 0) -> str:
        """Indented one-line-per-node listing of the subtree with geometry."""
        lines = [f"{'  ' * indent}{self.label()} {self.size}"]
        for child in self.children:
            lines.append(child.dump(indent + 1))
        return "\n".join(lines)
