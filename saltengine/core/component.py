"""
Component base class for data-only components.

Components are pydantic models holding entity data. Behaviour
lives in Systems, which read and write component fields.

Usage:
    class Transform(Component):
        x: float = 0.0
        y: float = 0.0

    class Anchor(Component):
        model_config = ConfigDict(frozen=True)
        x: float
        y: float
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Pydantic gives every component validation on construction
    and on assignment, so a system can never write a value of
    the wrong type into an entity.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )

    # Id of the owning entity, set by Entity.add
    _entity_id: int | None = None

    @property
    def entity_id(self) -> int | None:
        """Id of the entity this component is attached to."""
        return self._entity_id
