"""Rendering pipeline: build, lay out and paint a document."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from boxdown.builder import DocumentBuilder
from boxdown.config import DEFAULT_COLUMNS, RenderConfig
from boxdown.events import Event
from boxdown.highlight import HighlightingService, PygmentsHighlighting
from boxdown.layout import layout
from boxdown.parser import parse_events
from boxdown.render import render
from boxdown.tree import Node


def build_tree(
    events: Iterable[Event],
    *,
    columns: int = DEFAULT_COLUMNS,
    highlighting: HighlightingService | None = None,
) -> Node:
    """Build and lay out the tree for *events*."""
    root = DocumentBuilder(events, highlighting).build(columns)
    layout(root)
    return root


def render_events(
    events: Iterable[Event],
    *,
    columns: int = DEFAULT_COLUMNS,
    highlighting: HighlightingService | None = None,
) -> str:
    """Render an event stream to terminal text, one newline per row."""
    return render(build_tree(events, columns=columns, highlighting=highlighting))


def render_markdown(text: str, config: RenderConfig | None = None) -> str:
    config = config or RenderConfig()
    return render_events(
        parse_events(text),
        columns=config.columns,
        highlighting=PygmentsHighlighting(config.theme),
    )


def push_ansi(
    events: Iterable[Event],
    out: TextIO | None = None,
    config: RenderConfig | None = None,
) -> None:
    """Render *events* and write the result to *out* (stdout by default)."""
    config = config or RenderConfig()
    output = render_events(
        events,
        columns=config.columns,
        highlighting=PygmentsHighlighting(config.theme),
    )
    (out or sys.stdout).write(output)
