"""
Entity class - a named bag of components.

Usage:
    entity = Entity("taph")
    entity.add(Anchor(x=300, y=250))
    entity.add(Encounter())

    if not entity.get(Encounter).met:
        ...
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Iterator, TypeVar

from saltengine.core.component import Component

if TYPE_CHECKING:
    from saltengine.core.world import World


C = TypeVar('C', bound=Component)


class Entity:
    """
    A container for components, identified by a unique id.

    Entities carry no behaviour of their own.
    """

    _id_counter = itertools.count(1)

    def __init__(self, name: str = ""):
        self._id = next(Entity._id_counter)
        self._name = name or f"Entity_{self._id}"
        self._components: dict[type[Component], Component] = {}
        self._active = True
        self._world: World | None = None

    @property
    def id(self) -> int:
        """Unique entity identifier."""
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def active(self) -> bool:
        """Whether systems should process this entity."""
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = value

    @property
    def world(self) -> World | None:
        return self._world

    def add(self, component: C) -> C:
        """
        Attach a component.

        Raises:
            ValueError: If the entity already has this component type
        """
        comp_type = type(component)
        if comp_type in self._components:
            raise ValueError(
                f"Entity {self._name} already has component {comp_type.__name__}"
            )

        component._entity_id = self._id
        self._components[comp_type] = component

        if self._world is not None:
            self._world._index_component(self, comp_type)

        return component

    def remove(self, component_type: type[C]) -> C | None:
        """Detach a component, returning it (or None if absent)."""
        component = self._components.pop(component_type, None)
        if component is not None:
            component._entity_id = None
            if self._world is not None:
                self._world._unindex_component(self, component_type)
        return component  # type: ignore

    def get(self, component_type: type[C]) -> C:
        """
        Get a component by type.

        Raises:
            KeyError: If the component is not attached
        """
        if component_type not in self._components:
            raise KeyError(
                f"Entity {self._name} does not have component {component_type.__name__}"
            )
        return self._components[component_type]  # type: ignore

    def try_get(self, component_type: type[C]) -> C | None:
        return self._components.get(component_type)  # type: ignore

    def has(self, *component_types: type[Component]) -> bool:
        """Check if the entity has all of the given component types."""
        return all(ct in self._components for ct in component_types)

    @property
    def components(self) -> Iterator[Component]:
        return iter(self._components.values())

    def __repr__(self) -> str:
        components = ", ".join(c.__name__ for c in self._components)
        return f"Entity({self._name}, id={self._id}, components=[{components}])"

    def __hash__(self) -> int:
        return hash(self._id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entity):
            return self._id == other._id
        return False
