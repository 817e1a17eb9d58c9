"""
System base class for per-tick logic.

Systems hold the game logic; components hold the data. A system
declares the component types it needs and is handed every active
entity carrying them, once per fixed tick.

Usage:
    class DriftSystem(System):
        required_components = [Transform]

        def process_entity(self, entity: Entity, dt: float) -> None:
            entity.get(Transform).x += 1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Iterator

from saltengine.core.component import Component

if TYPE_CHECKING:
    from saltengine.core.entity import Entity
    from saltengine.core.world import World


class System(ABC):
    """
    Base class for all systems.

    Override required_components to choose entities and
    process_entity to define the logic. Systems that work on a
    single known entity can override update instead.
    """

    required_components: ClassVar[list[type[Component]]] = []

    # Execution order (higher = earlier)
    priority: ClassVar[int] = 0

    def __init__(self):
        self._world: World | None = None
        self.enabled = True

    @property
    def world(self) -> World:
        """Get the world this system belongs to."""
        if self._world is None:
            raise RuntimeError(f"System {self.__class__.__name__} not attached to world")
        return self._world

    def on_add(self, world: World) -> None:
        """Called when the system is added to a world."""
        self._world = world

    def on_remove(self) -> None:
        """Called when the system is removed from a world."""
        self._world = None

    def get_entities(self) -> Iterator[Entity]:
        """Entities matching required_components, in creation order."""
        if self._world is None:
            return iter([])
        if not self.required_components:
            return self._world.entities
        return self._world.get_entities_with(*self.required_components)

    def update(self, dt: float) -> None:
        """
        Run one tick.

        Args:
            dt: Fixed timestep in seconds
        """
        if not self.enabled:
            return

        for entity in self.get_entities():
            if entity.active:
                self.process_entity(entity, dt)

    @abstractmethod
    def process_entity(self, entity: Entity, dt: float) -> None:
        """Process a single entity."""

    def __repr__(self) -> str:
        required = ", ".join(c.__name__ for c in self.required_components)
        return f"{self.__class__.__name__}(requires=[{required}])"
