"""
Meeting controller - the input boundary of the game core.

Wires GameState, InputHandler and the systems together, and
exposes the discrete input operations plus tick(). Nothing here
touches pygame's display, so the whole game can be driven from
tests.

Usage:
    controller = MeetingController()
    controller.key_down("ArrowRight")
    for _ in range(10):
        controller.tick()
    view = controller.view()
"""

from __future__ import annotations

import logging
from typing import Iterable

from saltengine.core import EventBus
from saltengine.input import InputHandler, PinchZoom, VirtualJoystick
from saltengine.core.actions import KeyId
from saltgame.config import SceneSettings
from saltgame.roster import CharacterSpec
from saltgame.state import GameState, SceneView
from saltgame.systems import DialogueManager, InteractionSystem, MovementSystem

logger = logging.getLogger(__name__)

Point = tuple[float, float]


class MeetingController:
    """
    Owns the meeting scene's state and subsystems.

    Events are applied synchronously in arrival order; tick()
    runs every system once.
    """

    def __init__(
        self,
        settings: SceneSettings | None = None,
        roster: Iterable[CharacterSpec] | None = None,
        event_bus: EventBus | None = None,
    ):
        self.settings = settings or SceneSettings()
        self.state = GameState(self.settings, roster, event_bus)

        self.input = InputHandler(
            self.state.event_bus,
            joystick=VirtualJoystick(max_distance=self.settings.joystick_max),
            pinch=PinchZoom(min_scale=self.settings.min_scale, max_scale=self.settings.max_scale),
            joystick_scale=self.settings.joystick_scale,
        )

        self.dialogue = DialogueManager(self.state)
        self.movement = MovementSystem(self.state, self.input)
        self.interaction = InteractionSystem(self.state, self.dialogue)

        self.state.world.add_system(self.movement)
        self.state.world.add_system(self.interaction)
        self.tick_count = 0

    # Keyboard

    def key_down(self, key: KeyId) -> None:
        self.input.key_down(key)

    def key_up(self, key: KeyId) -> None:
        self.input.key_up(key)

    def interact(self) -> None:
        """Interaction request from a click or tap."""
        self.interaction.interact()

    # Touch

    def drag_start(self, point: Point) -> None:
        self.input.joystick.start(point)
        self._sync_joystick()

    def drag_move(self, point: Point) -> None:
        self.input.joystick.move(point)
        self._sync_joystick()

    def drag_end(self) -> None:
        self.input.joystick.end()
        self._sync_joystick()

    def pinch_start(self, p1: Point, p2: Point) -> None:
        self.input.pinch.start(p1, p2)

    def pinch_move(self, p1: Point, p2: Point) -> None:
        self.state.scale = self.input.pinch.move(p1, p2)

    def enable_touch_controls(self) -> None:
        if not self.state.touch_controls:
            logger.info("Touch input detected, showing touch controls")
        self.state.touch_controls = True

    # Ticks

    def tick(self) -> None:
        """Run one fixed tick."""
        self.tick_count += 1
        self.state.world.update(self.settings.tick_period)

    def view(self) -> SceneView:
        return self.state.snapshot()

    def shutdown(self) -> None:
        """Detach systems and drop every subscription."""
        self.input.release_all()
        self.state.world.clear()

    def _sync_joystick(self) -> None:
        self.state.joystick = self.input.joystick.vector
