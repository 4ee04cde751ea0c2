"""Render configuration: column budget and highlighting theme.

Defaults can be overridden with the ``BOXDOWN_COLUMNS`` and
``BOXDOWN_THEME`` environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from boxdown.highlight import DEFAULT_THEME

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS = 80


@dataclass
class RenderConfig:
    columns: int = DEFAULT_COLUMNS
    theme: str = DEFAULT_THEME


def load_config() -> RenderConfig:
    config = RenderConfig()

    columns = os.environ.get("BOXDOWN_COLUMNS")
    if columns:
        try:
            value = int(columns)
        except ValueError:
            value = 0
        if value > 0:
            config.columns = value
        else:
            logger.warning("Ignoring invalid BOXDOWN_COLUMNS=%r", columns)

    theme = os.environ.get("BOXDOWN_THEME")
    if theme:
        config.theme = theme

    return config
