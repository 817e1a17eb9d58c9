"""
Two-finger pinch zoom.

Only drives a display scale factor; it has no effect on gameplay.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Point = tuple[float, float]


def _distance(p1: Point, p2: Point) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


@dataclass
class PinchZoom:
    """
    Pinch gesture tracker.

    The scale follows the ratio of the current finger distance to
    the distance at pinch start, relative to the scale at pinch
    start, and is always clamped to [min_scale, max_scale].
    """
    min_scale: float = 0.5
    max_scale: float = 2.0
    scale: float = 1.0
    _start_distance: float = 0.0
    _start_scale: float = 1.0

    def start(self, p1: Point, p2: Point) -> None:
        self._start_distance = _distance(p1, p2)
        self._start_scale = self.scale

    def move(self, p1: Point, p2: Point) -> float:
        """Update from the current finger positions and return the scale."""
        if self._start_distance <= 0:
            return self.scale

        ratio = _distance(p1, p2) / self._start_distance
        self.scale = max(self.min_scale, min(self.max_scale, self._start_scale * ratio))
        logger.debug("Pinch scale %.2f", self.scale)
        return self.scale

    def reset(self) -> None:
        self.scale = 1.0
        self._start_distance = 0.0
        self._start_scale = 1.0
