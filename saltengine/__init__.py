"""
Salt Engine

A small fixed-timestep pygame engine with a minimal
entity/component store, typed event bus and touch-aware input.

Quick Start:
    from saltengine import Game, GameConfig, Scene

    class MyScene(Scene):
        def update(self, dt: float) -> None:
            pass

        def render(self, surface, alpha: float) -> None:
            pass

    game = Game(GameConfig(title="My Game"))
    game.scene_manager.push(MyScene(game))
    game.run()
"""

__version__ = "0.1.0"

from saltengine.core import (
    Game,
    GameConfig,
    Scene,
    SceneManager,
    Entity,
    Component,
    System,
    World,
    EventBus,
    Event,
    EngineEvent,
    Action,
)

from saltengine.input import InputHandler, InputEvent, VirtualJoystick, PinchZoom

__all__ = [
    # Core
    "Game",
    "GameConfig",
    "Scene",
    "SceneManager",
    # ECS
    "Entity",
    "Component",
    "System",
    "World",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
    # Input
    "InputHandler",
    "InputEvent",
    "VirtualJoystick",
    "PinchZoom",
    "Action",
]
