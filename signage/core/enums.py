"""Enumerations shared across signage subsystems."""
from __future__ import annotations

from enum import Enum


class DisplayMode(str, Enum):
    """Presentation modes the rotation engine alternates between."""

    MONTHLY = "monthly"
    SPOTLIGHT = "spotlight"


class SizeClass(str, Enum):
    """Coarse size hints handed to renderers, ordered largest first."""

    XLARGE = "xlarge"
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @property
    def rank(self) -> int:
        """Return 0 for the largest class, increasing as classes shrink."""

        return list(SizeClass).index(self)
