"""
World container for entities and systems.

Queries return entities in creation order, so code that scans a
list of entities (a character roster, for instance) sees them in
the order they were created.

Usage:
    world = World()
    world.add_system(MovementSystem(state, input_handler))

    player = world.create_entity("player")
    player.add(Transform(x=100, y=300))

    # Once per fixed tick:
    world.update(dt)
"""

from __future__ import annotations

import logging
from typing import Iterator

from saltengine.core.component import Component
from saltengine.core.entity import Entity
from saltengine.core.events import EngineEvent, EventBus
from saltengine.core.system import System

logger = logging.getLogger(__name__)


class World:
    """
    Holds entities, a component index and the tick systems.
    """

    def __init__(self, event_bus: EventBus | None = None):
        self.event_bus = event_bus or EventBus()

        # Insertion-ordered: id -> entity
        self._entities: dict[int, Entity] = {}
        self._entities_by_name: dict[str, Entity] = {}
        self._component_index: dict[type[Component], set[int]] = {}
        self._systems: list[System] = []

    # Entities

    def create_entity(self, name: str = "") -> Entity:
        """Create a new entity in this world."""
        return self.add_entity(Entity(name))

    def add_entity(self, entity: Entity) -> Entity:
        """
        Add an existing entity.

        Raises:
            ValueError: If the entity is already in this world
        """
        if entity.id in self._entities:
            raise ValueError(f"Entity {entity.id} already in world")

        entity._world = self
        self._entities[entity.id] = entity
        self._entities_by_name[entity.name] = entity
        for component in entity.components:
            self._index_component(entity, type(component))

        self.event_bus.publish(EngineEvent.ENTITY_CREATED, entity=entity)
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Remove an entity immediately."""
        if self._entities.pop(entity.id, None) is None:
            return

        for ids in self._component_index.values():
            ids.discard(entity.id)
        if self._entities_by_name.get(entity.name) is entity:
            del self._entities_by_name[entity.name]
        entity._world = None

        self.event_bus.publish(EngineEvent.ENTITY_DESTROYED, entity=entity)

    def get_entity_by_name(self, name: str) -> Entity | None:
        return self._entities_by_name.get(name)

    @property
    def entities(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    # Component index

    def _index_component(self, entity: Entity, component_type: type[Component]) -> None:
        self._component_index.setdefault(component_type, set()).add(entity.id)

    def _unindex_component(self, entity: Entity, component_type: type[Component]) -> None:
        if component_type in self._component_index:
            self._component_index[component_type].discard(entity.id)

    def get_entities_with(self, *component_types: type[Component]) -> Iterator[Entity]:
        """
        Get all entities that have ALL the given component types.

        Returns:
            Iterator of matching entities, in creation order
        """
        if not component_types:
            return iter([])

        matching: set[int] | None = None
        for comp_type in component_types:
            ids = self._component_index.get(comp_type, set())
            matching = ids.copy() if matching is None else matching & ids

        return iter([e for eid, e in self._entities.items() if eid in matching])

    # Systems

    def add_system(self, system: System) -> None:
        self._systems.append(system)
        self._systems.sort(key=lambda s: -s.priority)
        system.on_add(self)
        logger.debug("Added system %r", system)

    def remove_system(self, system: System) -> None:
        if system in self._systems:
            self._systems.remove(system)
            system.on_remove()

    def get_system(self, system_type: type[System]) -> System | None:
        for system in self._systems:
            if isinstance(system, system_type):
                return system
        return None

    def update(self, dt: float) -> None:
        """Run every enabled system for one tick."""
        for system in self._systems:
            if system.enabled:
                system.update(dt)

    def clear(self) -> None:
        """Remove all entities and systems."""
        for entity in list(self._entities.values()):
            self.remove_entity(entity)
        for system in self._systems[:]:
            self.remove_system(system)
        self._component_index.clear()
