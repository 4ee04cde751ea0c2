"""Fatal error types.

These signal programming or precondition errors (malformed event nesting,
unsupported node kinds). Callers are not expected to recover from them.
"""

from __future__ import annotations


class BoxdownError(RuntimeError):
    """Base class for unrecoverable rendering failures."""


class BuildError(BoxdownError):
    """The structural event stream was malformed."""


class LayoutError(BoxdownError):
    """The document tree cannot be laid out."""


class RenderError(BoxdownError):
    """The laid-out tree contains something that cannot be painted."""
