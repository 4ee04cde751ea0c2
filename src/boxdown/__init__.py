"""boxdown: render markdown to the terminal with a box-model layout engine."""

# Color and style
from boxdown.color import Color, TermColor
from boxdown.style import BorderType, Style, TextAlign

# Configuration
from boxdown.config import DEFAULT_COLUMNS, RenderConfig, load_config

# Pipeline
from boxdown.builder import DocumentBuilder
from boxdown.document import build_tree, push_ansi, render_events, render_markdown
from boxdown.layout import CutHere, Normal, Reject, layout
from boxdown.render import render

# Errors
from boxdown.errors import BoxdownError, BuildError, LayoutError, RenderError

# Highlighting
from boxdown.highlight import (
    DEFAULT_THEME,
    Highlighter,
    HighlightingService,
    HighlightStyle,
    PygmentsHighlighting,
)

# Markdown front end
from boxdown.parser import parse_events

# Document tree
from boxdown.tree import BoxSize, Edges, Node, NodeKind, Rect

# Unicode utilities
from boxdown.utils import display_width, split_index, wrap_text

__all__ = [
    # Color and style
    "BorderType",
    "Color",
    "Style",
    "TermColor",
    "TextAlign",
    # Configuration
    "DEFAULT_COLUMNS",
    "RenderConfig",
    "load_config",
    # Pipeline
    "CutHere",
    "DocumentBuilder",
    "Normal",
    "Reject",
    "build_tree",
    "layout",
    "push_ansi",
    "render",
    "render_events",
    "render_markdown",
    # Errors
    "BoxdownError",
    "BuildError",
    "LayoutError",
    "RenderError",
    # Highlighting
    "DEFAULT_THEME",
    "HighlightStyle",
    "Highlighter",
    "HighlightingService",
    "PygmentsHighlighting",
    # Markdown front end
    "parse_events",
    # Document tree
    "BoxSize",
    "Edges",
    "Node",
    "NodeKind",
    "Rect",
    # Unicode utilities
    "display_width",
    "split_index",
    "wrap_text",
]
