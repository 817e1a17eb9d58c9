"""
Core engine module.

Exports:
- Game, GameConfig: Main game class and configuration
- Scene, SceneManager: Scene management
- Entity: Entity container
- Component: Component base
- System: Per-tick logic base class
- World: Entity/system container
- EventBus, Event, EngineEvent: Event system
- Action: Input actions
"""

from saltengine.core.game import Game, GameConfig
from saltengine.core.scene import Scene, SceneManager
from saltengine.core.entity import Entity
from saltengine.core.component import Component
from saltengine.core.system import System
from saltengine.core.world import World
from saltengine.core.events import EventBus, Event, EngineEvent
from saltengine.core.actions import Action, resolve_key

__all__ = [
    # Game
    "Game",
    "GameConfig",
    # Scene
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
    "Action",
    "resolve_key",
]
