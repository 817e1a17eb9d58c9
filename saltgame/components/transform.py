"""
Position components.
"""

from __future__ import annotations

import math

from pydantic import ConfigDict

from saltengine.core.component import Component


class Transform(Component):
    """
    Mutable position in scene space (top-left corner of the sprite).

    Attributes:
        x: X position in pixels
        y: Y position in pixels
    """
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def distance_to(self, other: Transform | Anchor) -> float:
        """Euclidean distance to another position."""
        return math.hypot(other.x - self.x, other.y - self.y)


class Anchor(Component):
    """
    Fixed position of a stationary entity. Frozen: assigning to
    x or y after creation raises a ValidationError.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)
