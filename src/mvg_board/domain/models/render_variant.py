"""Render variant for a departure tile."""

from enum import Enum


class RenderVariant(Enum):
    """How a departure's text is drawn."""

    PLAIN = "plain"
    STRUCK = "struck"  # cancelled departures
