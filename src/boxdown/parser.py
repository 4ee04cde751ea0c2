"""Markdown front end: converts markdown-it-py tokens into document events.

markdown-it-py produces a flat token list with ``*_open`` / ``*_close``
pairs and ``inline`` tokens carrying their children. This module walks it
and yields the ``boxdown.events`` vocabulary lazily.
"""

from __future__ import annotations

from collections.abc import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from boxdown import events as ev

# commonmark plus GFM tables and strikethrough (no linkify dependency)
_md_parser = MarkdownIt("commonmark").enable(["table", "strikethrough"])

_SIMPLE_BLOCKS: dict[str, ev.Construct] = {
    "blockquote": ev.BlockQuote(),
    "list_item": ev.Item(),
    "thead": ev.TableHead(),
    "th": ev.TableCell(),
    "td": ev.TableCell(),
}

_SIMPLE_INLINES: dict[str, ev.Construct] = {
    "em": ev.Emphasis(),
    "strong": ev.Strong(),
    "s": ev.Strikethrough(),
}


def parse_events(text: str) -> Iterator[ev.Event]:
    """Parse markdown *text* and yield its structural events in order."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    tokens = _md_parser.parse(text)
    yield from _block_events(tokens)


def _split_suffix(token_type: str) -> tuple[str, str]:
    name, _, suffix = token_type.rpartition("_")
    return name, suffix


def _block_events(tokens: list[Token]) -> Iterator[ev.Event]:
    # Per open token, the construct used for its End event
    stack: list[ev.Construct | None] = []
    in_head = False

    for i, tok in enumerate(tokens):
        t = tok.type

        if t == "inline":
            yield from _inline_events(tok.children or [])
            continue

        if t in ("fence", "code_block"):
            construct = ev.CodeBlock((tok.info or "").strip())
            yield ev.Start(construct)
            for line in tok.content.splitlines(keepends=True):
                yield ev.Text(line)
            yield ev.End(construct)
            continue

        if t == "html_block":
            for line in tok.content.splitlines(keepends=True):
                yield ev.RawMarkup(line)
            continue

        if t == "hr":
            yield ev.Start(ev.Rule())
            yield ev.End(ev.Rule())
            continue

        if tok.nesting == 1:
            construct = _open_construct(tokens, i)
            if t == "thead_open":
                in_head = True
            if construct is None or (in_head and t == "tr_open"):
                stack.append(None)
                continue
            stack.append(construct)
            yield ev.Start(construct)
            continue

        if tok.nesting == -1:
            if t == "thead_close":
                in_head = False
            construct = stack.pop() if stack else None
            if construct is not None:
                yield ev.End(construct)


def _open_construct(tokens: list[Token], index: int) -> ev.Construct | None:
    tok = tokens[index]
    name, _ = _split_suffix(tok.type)

    if name == "paragraph":
        return None if tok.hidden else ev.Paragraph()
    if name == "heading":
        return ev.Header(int(tok.tag[1:]))
    if name == "bullet_list":
        return ev.List(None)
    if name == "ordered_list":
        start = tok.attrs.get("start", 1)
        try:
            return ev.List(int(start))
        except (TypeError, ValueError):
            return ev.List(1)
    if name == "table":
        return ev.Table(_table_alignments(tokens, index))
    if name == "tr":
        return ev.TableRow()
    return _SIMPLE_BLOCKS.get(name)


def _table_alignments(tokens: list[Token], index: int) -> tuple[ev.Alignment, ...]:
    alignments: list[ev.Alignment] = []
    for tok in tokens[index + 1 :]:
        if tok.type == "tr_close":
            break
        if tok.type == "th_open":
            style = str(tok.attrs.get("style", ""))
            if "left" in style:
                alignments.append("left")
            elif "center" in style:
                alignments.append("center")
            elif "right" in style:
                alignments.append("right")
            else:
                alignments.append("none")
    return tuple(alignments)


def _inline_events(children: list[Token]) -> Iterator[ev.Event]:
    links: list[ev.Link] = []

    for child in children:
        ct = child.type

        if ct == "text":
            if child.content:
                yield ev.Text(child.content)
        elif ct == "softbreak":
            yield ev.SoftBreak()
        elif ct == "hardbreak":
            yield ev.HardBreak()
        elif ct == "code_inline":
            yield ev.Start(ev.Code())
            yield ev.Text(child.content)
            yield ev.End(ev.Code())
        elif ct == "link_open":
            link = ev.Link(str(child.attrs.get("href", "")), str(child.attrs.get("title", "")))
            links.append(link)
            yield ev.Start(link)
        elif ct == "link_close":
            yield ev.End(links.pop() if links else ev.Link(""))
        elif ct == "image":
            image = ev.Image(str(child.attrs.get("src", "")), str(child.attrs.get("title", "")))
            yield ev.Start(image)
            yield from _inline_events(child.children or [])
            yield ev.End(image)
        elif ct == "html_inline":
            yield ev.InlineRawMarkup(child.content)
        elif ct.endswith(("_open", "_close")) and _split_suffix(ct)[0] in _SIMPLE_INLINES:
            name, suffix = _split_suffix(ct)
            construct = _SIMPLE_INLINES[name]
            yield ev.Start(construct) if suffix == "open" else ev.End(construct)
        elif child.content:
            yield ev.Text(child.content)
