"""
On-screen virtual joystick driven by a drag gesture.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass
class VirtualJoystick:
    """
    Drag-to-steer joystick.

    The drag origin is recorded on start; every move sets the
    vector to the offset from that origin, shortened to
    max_distance along the same angle when the finger goes
    further. Release snaps the vector back to zero.

    Attributes:
        max_distance: Longest allowed vector, in pixels
        active: Whether a drag is in progress
        origin: Where the current drag started
        x: Current vector X
        y: Current vector Y
    """
    max_distance: float = 50.0
    active: bool = False
    origin: Point = (0.0, 0.0)
    x: float = 0.0
    y: float = 0.0

    @property
    def vector(self) -> Point:
        return (self.x, self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def start(self, point: Point) -> None:
        self.origin = (float(point[0]), float(point[1]))
        self.active = True

    def move(self, point: Point) -> None:
        if not self.active:
            return

        dx = point[0] - self.origin[0]
        dy = point[1] - self.origin[1]
        distance = math.hypot(dx, dy)

        if distance > self.max_distance:
            angle = math.atan2(dy, dx)
            dx = math.cos(angle) * self.max_distance
            dy = math.sin(angle) * self.max_distance

        self.x = dx
        self.y = dy

    def end(self) -> None:
        self.active = False
        self.x = 0.0
        self.y = 0.0
