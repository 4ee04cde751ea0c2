"""Structural events describing a document, in reading order.

A producer (see ``boxdown.parser``) emits ``Start``/``End`` pairs around
constructs, with text and break events in between. The stream must be
well nested.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

# ---------------------------------------------------------------------------
# Constructs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Paragraph:
    pass


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class Header:
    level: int


Alignment = Literal["none", "left", "center", "right"]


@dataclass(frozen=True)
class Table:
    alignments: tuple[Alignment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TableHead:
    pass


@dataclass(frozen=True)
class TableRow:
    pass


@dataclass(frozen=True)
class TableCell:
    pass


@dataclass(frozen=True)
class BlockQuote:
    pass


@dataclass(frozen=True)
class CodeBlock:
    language: str = ""


@dataclass(frozen=True)
class List:
    start: int | None = None


@dataclass(frozen=True)
class Item:
    pass


@dataclass(frozen=True)
class Emphasis:
    pass


@dataclass(frozen=True)
class Strong:
    pass


@dataclass(frozen=True)
class Strikethrough:
    pass


@dataclass(frozen=True)
class Code:
    pass


@dataclass(frozen=True)
class Link:
    destination: str
    title: str = ""


@dataclass(frozen=True)
class Image:
    destination: str
    title: str = ""


@dataclass(frozen=True)
class FootnoteDefinition:
    name: str


Construct: TypeAlias = (
    Paragraph
    | Rule
    | Header
    | Table
    | TableHead
    | TableRow
    | TableCell
    | BlockQuote
    | CodeBlock
    | List
    | Item
    | Emphasis
    | Strong
    | Strikethrough
    | Code
    | Link
    | Image
    | FootnoteDefinition
)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Start:
    construct: Construct


@dataclass(frozen=True)
class End:
    construct: Construct


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class RawMarkup:
    """A block of raw (HTML) markup."""

    text: str


@dataclass(frozen=True)
class InlineRawMarkup:
    text: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class FootnoteReference:
    name: str


Event: TypeAlias = (
    Start
    | End
    | Text
    | RawMarkup
    | InlineRawMarkup
    | SoftBreak
    | HardBreak
    | FootnoteReference
)
