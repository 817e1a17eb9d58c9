"""
Core Game class with fixed timestep game loop.

The Game class is the main entry point for the engine. It handles:
- Window creation (Pygame)
- Fixed timestep update loop (deterministic movement)
- Variable render loop
- Scene management delegation
"""

from __future__ import annotations

import logging
import time

import pygame

from saltengine.core.events import EngineEvent, EventBus
from saltengine.core.scene import SceneManager

logger = logging.getLogger(__name__)


class GameConfig:
    """Configuration for the game engine."""

    def __init__(
        self,
        title: str = "Silent Salt",
        width: int = 800,
        height: int = 600,
        target_fps: int = 60,
        fixed_timestep: float = 0.016,
        max_frame_skip: int = 5,
        resizable: bool = True,
        debug: bool = False,
    ):
        self.title = title
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.fixed_timestep = fixed_timestep
        self.max_frame_skip = max_frame_skip
        self.resizable = resizable
        self.debug = debug


class Game:
    """
    Main game engine class.

    Logic runs in fixed ticks of config.fixed_timestep seconds,
    however fast or slow frames are drawn, so the same input
    history always produces the same state.

    Usage:
        game = Game(GameConfig(title="Silent Salt"))
        game.scene_manager.push(MeetingScene(game))
        game.run()
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._running = False
        self._paused = False

        pygame.init()

        flags = pygame.DOUBLEBUF
        if self.config.resizable:
            flags |= pygame.RESIZABLE

        self.screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags
        )
        pygame.display.set_caption(self.config.title)

        self.event_bus = EventBus()
        self.scene_manager = SceneManager(self)

        # Timing
        self._clock = pygame.time.Clock()
        self._accumulator = 0.0
        self._current_time = time.perf_counter()
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0
        self.tick_count = 0

        self.debug_mode = self.config.debug

    @property
    def width(self) -> int:
        return self.screen.get_width()

    @property
    def height(self) -> int:
        return self.screen.get_height()

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        """
        Start the main game loop. Returns after quit().
        """
        self._running = True
        self._current_time = time.perf_counter()
        self.event_bus.publish(EngineEvent.GAME_START)
        logger.info("Game loop started (tick %.0f ms)", self.config.fixed_timestep * 1000)

        try:
            while self._running:
                new_time = time.perf_counter()
                frame_time = new_time - self._current_time
                self._current_time = new_time

                # Prevent spiral of death
                if frame_time > 0.25:
                    frame_time = 0.25

                self._accumulator += frame_time

                self._process_events()
                self.advance(self._accumulator)

                self._render(self._accumulator / self.config.fixed_timestep)
                self._update_fps()
                self._clock.tick(self.config.target_fps)
        finally:
            self._shutdown()

    def advance(self, elapsed: float) -> int:
        """
        Run as many fixed ticks as fit in the accumulated time.

        Args:
            elapsed: Accumulated, not yet simulated, time in seconds

        Returns:
            Number of ticks run
        """
        self._accumulator = elapsed
        updates = 0
        while self._accumulator >= self.config.fixed_timestep:
            if not self._paused:
                self._fixed_update(self.config.fixed_timestep)
            self._accumulator -= self.config.fixed_timestep
            updates += 1

            if updates >= self.config.max_frame_skip:
                self._accumulator = 0.0
                break
        return updates

    def quit(self) -> None:
        """Request game shutdown."""
        self._running = False

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.VIDEORESIZE:
                self.scene_manager.on_resize(event.w, event.h)
                self.event_bus.publish(EngineEvent.WINDOW_RESIZED, width=event.w, height=event.h)
            else:
                self.scene_manager.handle_event(event)

    def _fixed_update(self, dt: float) -> None:
        self.tick_count += 1
        self.scene_manager.update(dt)

    def _render(self, alpha: float) -> None:
        self.scene_manager.render(self.screen, alpha)
        pygame.display.flip()

    def _update_fps(self) -> None:
        self._frame_count += 1
        current = time.perf_counter()

        if current - self._fps_update_time >= 1.0:
            self._fps = self._frame_count / (current - self._fps_update_time)
            self._frame_count = 0
            self._fps_update_time = current

            if self.debug_mode:
                pygame.display.set_caption(
                    f"{self.config.title} | FPS: {self._fps:.1f}"
                )

    def _shutdown(self) -> None:
        self.event_bus.publish(EngineEvent.GAME_QUIT)
        self.scene_manager.clear()
        self.scene_manager.update(0.0)
        pygame.quit()
        logger.info("Game shut down after %d ticks", self.tick_count)
