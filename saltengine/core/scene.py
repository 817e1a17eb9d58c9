"""
Scene management.

A Scene is one game state with its own update, render and event
handling. The SceneManager keeps a stack of them; only the top
scene receives events, updates and renders.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import pygame

from saltengine.core.events import EngineEvent

if TYPE_CHECKING:
    from saltengine.core.game import Game
    from saltengine.core.world import World

logger = logging.getLogger(__name__)


class Scene(ABC):
    """
    Abstract base class for game scenes.

    Lifecycle:
        1. __init__: scene is created
        2. on_enter: scene becomes the top of the stack
        3. update/render/handle_event: every frame while on top
        4. on_exit: scene is removed
        5. on_destroy: release resources, stop anything recurring
    """

    def __init__(self, game: Game):
        self.game = game
        self.world: World | None = None
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False

    def on_destroy(self) -> None:
        if self.world:
            self.world.clear()

    def on_resize(self, width: int, height: int) -> None:
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Update scene logic.

        Args:
            dt: Fixed timestep in seconds
        """

    @abstractmethod
    def render(self, surface: pygame.Surface, alpha: float) -> None:
        """
        Draw the scene.

        Args:
            surface: Display surface to draw on
            alpha: Interpolation factor (0-1) between ticks
        """

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a pygame event.

        Returns:
            True if the event was consumed
        """
        return False


class SceneManager:
    """
    Stack of scenes. Push and clear are deferred to the next update so a
    scene can replace itself from inside its own handlers.
    """

    def __init__(self, game: Game):
        self.game = game
        self._stack: list[Scene] = []
        self._pending_operations: list[tuple[str, Any]] = []

    @property
    def current(self) -> Scene | None:
        return self._stack[-1] if self._stack else None

    def push(self, scene: Scene) -> None:
        self._pending_operations.append(("push", scene))

    def clear(self) -> None:
        self._pending_operations.append(("clear", None))

    def update(self, dt: float) -> None:
        self._process_pending()

        scene = self.current
        if scene:
            scene.update(dt)
            if scene.world:
                scene.world.update(dt)

    def render(self, surface: pygame.Surface, alpha: float) -> None:
        if self.current:
            self.current.render(surface, alpha)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.current:
            self.current.handle_event(event)

    def on_resize(self, width: int, height: int) -> None:
        for scene in self._stack:
            scene.on_resize(width, height)

    def _process_pending(self) -> None:
        while self._pending_operations:
            op, arg = self._pending_operations.pop(0)
            if op == "push":
                self._do_push(arg)
            elif op == "clear":
                while self._stack:
                    self._do_pop()

    def _do_push(self, scene: Scene) -> None:
        if self._stack:
            self._stack[-1].on_exit()
        self._stack.append(scene)
        scene.on_enter()
        self.game.event_bus.publish(EngineEvent.SCENE_PUSHED, scene=scene)
        logger.debug("Pushed scene %s", type(scene).__name__)

    def _do_pop(self) -> None:
        if not self._stack:
            return
        scene = self._stack.pop()
        scene.on_exit()
        scene.on_destroy()
        self.game.event_bus.publish(EngineEvent.SCENE_POPPED, scene=scene)
        logger.debug("Popped scene %s", type(scene).__name__)

        if self._stack:
            self._stack[-1].on_enter()
