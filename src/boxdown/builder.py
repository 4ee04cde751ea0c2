"""Document builder: turns a structural event stream into a document tree.

The builder is a recursive descent over the events: ``Start`` opens a child
node and recurses into it, the matching ``End`` returns. Links and
footnote definitions are also collected into two side blocks which are
appended to the root once the body is complete.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from boxdown import events as ev
from boxdown.color import Color, TermColor
from boxdown.errors import BuildError
from boxdown.highlight import Highlighter, HighlightingService, HighlightStyle
from boxdown.style import BorderType
from boxdown.tree import Node, NodeKind

logger = logging.getLogger(__name__)

BULLET = "*"
TAB_SIZE = 4

_HEADER_BORDERS: dict[int, BorderType] = {
    1: BorderType.THIN,
    2: BorderType.BOLD,
    3: BorderType.DOUBLE,
    4: BorderType.THIN,
    5: BorderType.DASH,
}


class DocumentBuilder:
    """Builds a tree from *events*, highlighting code blocks with *highlighting*."""

    def __init__(
        self,
        events: Iterable[ev.Event],
        highlighting: HighlightingService | None = None,
    ) -> None:
        self._events = iter(events)
        self._highlighting = highlighting
        self._highlighter: Highlighter | None = None
        self._depth = 0
        self.links: Node | None = None
        self.footnotes: Node | None = None

    def build(self, width: int) -> Node:
        """Consume the whole stream and return the root of the document."""
        self.links = Node.block()
        self.footnotes = Node.block()
        root = Node.root(width)
        self._build(root)
        root.swallow(self.links)
        root.swallow(self.footnotes)
        self.links = None
        self.footnotes = None
        return root

    # -- recursion ----------------------------------------------------------

    def _descend(self, node: Node) -> None:
        self._depth += 1
        self._build(node)
        self._depth -= 1

    def _build(self, parent: Node) -> None:
        for event in self._events:
            match event:
                case ev.Start(construct):
                    self._start(parent, construct)
                case ev.End(construct):
                    if self._end(parent, construct):
                        return
                case ev.Text(text):
                    self._add_text(parent, text.expandtabs(TAB_SIZE))
                case ev.RawMarkup(text) | ev.InlineRawMarkup(text):
                    for node in self._add_lines(parent, text.expandtabs(TAB_SIZE)):
                        node.style.fg = Color.from_light(TermColor.RED)
                case ev.SoftBreak() | ev.HardBreak():
                    parent.add_break()
                case ev.FootnoteReference(name):
                    child = parent.add_text(name)
                    child.style.fg = Color.from_dark(TermColor.GREEN)
                    child.style.underline = True
                case _:
                    raise BuildError(f"unknown event {event!r}")
        if self._depth > 0:
            raise BuildError("event stream ended inside an open construct")

    def _end(self, parent: Node, construct: ev.Construct) -> bool:
        """Handle an ``End`` event; return True when it closes *parent*."""
        match construct:
            case ev.Rule() | ev.Table():
                return False
            case ev.TableCell():
                parent.add_text(" ")
                return False
            case ev.TableHead() | ev.TableRow():
                parent.add_break()
                return False
        if self._depth == 0:
            raise BuildError(f"End({construct!r}) without a matching Start")
        return True

    # -- constructs ---------------------------------------------------------

    def _start(self, parent: Node, construct: ev.Construct) -> None:
        logger.debug("start %r at depth %d", construct, self._depth)
        match construct:
            case ev.Paragraph():
                child = parent.add_block()
                self._descend(child)
                child.size.border.bottom = 1

            case ev.Rule():
                child = parent.add_block()
                child.style.extend = True
                child.size.border.bottom = 1
                child.style.set_border(BorderType.THIN)
                child.style.fg = Color.from_dark(TermColor.YELLOW)

            case ev.Header(level):
                if not 1 <= level <= 6:
                    raise BuildError(f"wrong heading level {level}")
                child = parent.add_header(level)
                child.size.border.bottom = 1
                if level == 1:
                    child.size.border.top = 1
                    child.size.border.left = 1
                    child.size.border.right = 1
                if level in _HEADER_BORDERS:
                    child.style.set_border(_HEADER_BORDERS[level])
                child.style.fg = Color.from_dark(TermColor.PURPLE)
                self._descend(child)

            case ev.Table() | ev.TableHead() | ev.TableRow() | ev.TableCell():
                pass

            case ev.BlockQuote():
                child = parent.add_block()
                self._descend(child)
                child.size.border.left = 1
                child.style.set_border(BorderType.THIN)
                child.style.fg = Color.from_dark(TermColor.CYAN)
                self._add_spacer(parent)

            case ev.CodeBlock(language):
                child = parent.add_block()
                child.style.code = True
                child.style.fg = Color.from_dark(TermColor.WHITE)
                child.style.bg = Color.from_dark(TermColor.BLACK)
                if self._highlighting is not None:
                    self._highlighter = self._highlighting.resolve(language)
                    logger.debug("highlighting %r: %s", language, self._highlighter is not None)
                try:
                    self._descend(child)
                finally:
                    self._highlighter = None
                self._add_spacer(parent)

            case ev.List(start):
                child = parent.add_list(start)
                self._descend(child)
                _label_bullets(child)
                child.size.border.bottom = 1

            case ev.Item():
                bullet = parent.add_bullet()
                bullet.style.fg = Color.from_light(TermColor.YELLOW)
                bullet.size.border.right = 1
                self._descend(parent.add_block())

            case ev.Emphasis():
                child = parent.add_inline()
                child.style.italic = True
                self._descend(child)

            case ev.Strong():
                child = parent.add_inline()
                child.style.bold = True
                self._descend(child)

            case ev.Strikethrough():
                child = parent.add_inline()
                child.style.strikethrough = True
                self._descend(child)

            case ev.Code():
                child = parent.add_inline()
                child.style.code = True
                child.style.fg = Color.from_dark(TermColor.WHITE)
                child.style.bg = Color.from_dark(TermColor.BLACK)
                self._descend(child)

            case ev.Link(destination):
                self._add_link(destination)
                child = parent.add_inline()
                child.style.underline = True
                child.style.fg = Color.from_dark(TermColor.BLUE)
                self._descend(child)

            case ev.Image(destination, title):
                label = parent.add_text(title)
                label.style.fg = Color.from_light(TermColor.BLACK)
                label.style.bg = Color.from_dark(TermColor.YELLOW)
                dest = parent.add_text(destination)
                dest.style.fg = Color.from_dark(TermColor.BLUE)
                dest.style.bg = Color.from_dark(TermColor.YELLOW)
                dest.style.underline = True
                child = parent.add_inline()
                child.style.italic = True
                self._descend(child)

            case ev.FootnoteDefinition(name):
                footnotes = self._side_block(self.footnotes)
                label = footnotes.add_text(name)
                label.style.fg = Color.from_dark(TermColor.GREEN)
                label.style.underline = True
                self._descend(footnotes)

            case _:
                raise BuildError(f"unknown construct {construct!r}")

    def _side_block(self, block: Node | None) -> Node:
        if block is None:
            raise BuildError("side collections only exist while building")
        return block

    def _add_link(self, destination: str) -> None:
        links = self._side_block(self.links)
        entry = links.add_text(destination)
        entry.style.fg = Color.from_dark(TermColor.BLUE)
        entry.style.underline = True
        links.add_break()

    def _add_spacer(self, parent: Node) -> None:
        parent.add_block().add_text("")

    # -- text ---------------------------------------------------------------

    def _add_text(self, parent: Node, text: str) -> None:
        if self._highlighter is None:
            self._add_lines(parent, text)
            return
        for style, piece in self._highlighter.highlight(text):
            for node in self._add_lines(parent, piece):
                _apply_highlight(node, style)

    def _add_lines(self, parent: Node, text: str) -> list[Node]:
        """Add *text* as Text nodes, turning each newline into a Break marker."""
        nodes: list[Node] = []
        pieces = text.split("\n")
        for i, piece in enumerate(pieces):
            last = i == len(pieces) - 1
            if piece or not last or i == 0:
                nodes.append(parent.add_text(piece))
            if not last:
                parent.add_break()
        return nodes


def _apply_highlight(node: Node, style: HighlightStyle) -> None:
    if style.foreground is not None:
        node.style.fg = Color.from_color(*style.foreground)
    node.style.bold |= style.bold
    node.style.italic |= style.italic
    node.style.underline |= style.underline


def _label_bullets(list_node: Node) -> None:
    """Label the bullets of a finished list.

    Ordered labels are not padded to a common width, so bullets of a list
    crossing a power of ten are not aligned.
    """
    number = list_node.start
    for child in list_node.children:
        if child.kind is not NodeKind.LIST_BULLET:
            continue
        if number is None:
            child.add_text(BULLET)
        else:
            child.add_text(str(number))
            number += 1
