"""Unicode text utilities: display width and grapheme-safe line breaking."""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (contains VS16, ZWJ, skin tone or regional indicators) -> 2
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # regional indicators
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(ch) <= 0x7E for ch in text)


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies."""
    if not text:
        return 0
    if _is_printable_ascii(text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = sum(grapheme_width(g) for g in grapheme.graphemes(text))
    return _cache_width(text, total)


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def split_index(text: str, width: int) -> int:
    """Offset of the longest grapheme prefix of *text* fitting in *width* columns."""
    if _is_printable_ascii(text):
        return min(len(text), max(width, 0))

    used = 0
    offset = 0
    for g in grapheme.graphemes(text):
        w = grapheme_width(g)
        if used + w > width:
            break
        used += w
        offset += len(g)
    return offset


def _first_grapheme_length(text: str) -> int:
    for g in grapheme.graphemes(text):
        return len(g)
    return 0


def wrap_text(text: str, width: int, at_line_start: bool) -> tuple[str, str] | None:
    """Break a text run that is wider than *width* columns.

    Prefers the last whitespace at or before the limit. Without one, the
    run is left for the next line (``None``) unless it already starts a
    line, in which case it is cut mid-word. Returns ``(head, tail)``; the
    head never exceeds *width* except when a single grapheme is wider than
    the whole line.
    """
    fit = split_index(text, width)

    # Offsets of whitespace graphemes up to and including the one right
    # after the fitting prefix.
    space_at: int | None = None
    offset = 0
    for g in grapheme.graphemes(text):
        if offset > fit:
            break
        if g.isspace():
            space_at = offset
        offset += len(g)

    if space_at is not None:
        head = text[:space_at].rstrip()
        if head:
            return head, text[space_at:].lstrip()
        # only leading whitespace fits; it is dropped like any other break
        rest = text.lstrip()
        if not at_line_start or not rest:
            return "", rest
        return wrap_text(rest, width, at_line_start)

    if not at_line_start:
        return None

    if fit == 0:
        fit = _first_grapheme_length(text)
    return text[:fit], text[fit:]
