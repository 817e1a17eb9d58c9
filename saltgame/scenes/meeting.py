"""
Meeting scene - pygame adapter around MeetingController.

Translates pygame events into controller calls, runs one
controller tick per fixed update and hands the SceneView to the
renderer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import pygame

from saltengine.core import Action, Event, Scene
from saltengine.input import InputEvent
from saltgame.config import SceneSettings
from saltgame.controller import MeetingController
from saltgame.render import SceneRenderer
from saltgame.roster import CharacterSpec

if TYPE_CHECKING:
    from saltengine.core import Game

logger = logging.getLogger(__name__)


class MeetingScene(Scene):
    """
    The single gameplay scene.

    Mouse and touch:
    - press inside the joystick pad starts a drag, motion steers,
      release stops
    - click on the interact button, or on the dialogue box while
      a dialogue is open, is an interaction request
    - two fingers pinch the display scale
    """

    def __init__(
        self,
        game: Game,
        settings: SceneSettings | None = None,
        roster: Iterable[CharacterSpec] | None = None,
    ):
        super().__init__(game)
        self.controller = MeetingController(settings, roster, game.event_bus)
        self.renderer = SceneRenderer(self.controller.settings)
        self._fingers: dict[int, tuple[float, float]] = {}

    @property
    def state(self):
        return self.controller.state

    def on_enter(self) -> None:
        super().on_enter()
        self.game.event_bus.subscribe(InputEvent.ACTION_PRESSED, self._on_action)

    def on_exit(self) -> None:
        self.game.event_bus.unsubscribe(InputEvent.ACTION_PRESSED, self._on_action)
        super().on_exit()

    def on_destroy(self) -> None:
        self.controller.shutdown()
        super().on_destroy()

    def update(self, dt: float) -> None:
        self.controller.tick()

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        self.renderer.draw(surface, self.controller.view())

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self.controller.input.process_event(event):
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._on_press(event.pos)
        if event.type == pygame.MOUSEMOTION and self.controller.input.joystick.active:
            self.controller.drag_move(event.pos)
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.controller.input.joystick.active:
                self.controller.drag_end()
                return True
            return False

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            self._on_finger(event)
            return True

        return False

    def _screen_size(self) -> tuple[int, int]:
        return (self.game.width, self.game.height)

    def _on_press(self, pos: tuple[int, int]) -> bool:
        size = self._screen_size()

        if self.state.touch_controls:
            if self.renderer.in_joystick_pad(pos, size):
                self.controller.drag_start(pos)
                return True
            if self.renderer.in_interact_button(pos, size):
                self.controller.interact()
                return True

        if self.state.session is not None:
            scene_point = self.renderer.to_scene(pos, size, self.state.scale)
            if self.renderer.dialogue_rect().collidepoint(scene_point):
                self.controller.interact()
                return True

        return False

    def _on_finger(self, event: pygame.event.Event) -> None:
        self.controller.enable_touch_controls()
        width, height = self._screen_size()
        point = (event.x * width, event.y * height)

        if event.type == pygame.FINGERUP:
            self._fingers.pop(event.finger_id, None)
            return

        self._fingers[event.finger_id] = point
        if len(self._fingers) != 2:
            return

        p1, p2 = list(self._fingers.values())
        if event.type == pygame.FINGERDOWN:
            self.controller.pinch_start(p1, p2)
        else:
            self.controller.pinch_move(p1, p2)

    def _on_action(self, event: Event) -> None:
        action = event.get("action")
        if action is Action.QUIT:
            self.game.quit()
        elif action is Action.DEBUG_TOGGLE:
            self.game.debug_mode = not self.game.debug_mode
            logger.info("Debug mode %s", "on" if self.game.debug_mode else "off")
