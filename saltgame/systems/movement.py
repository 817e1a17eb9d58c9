"""
Movement system - moves the player one step per tick.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from saltengine.core import Entity, System
from saltgame.components import PlayerControl, Transform

if TYPE_CHECKING:
    from saltengine.input import InputHandler
    from saltgame.state import GameState


class MovementSystem(System):
    """
    Applies the player's movement intent each tick.

    Per tick: position += speed * intent, then both axes are
    clamped into the scene. Steps are per tick, not per second,
    so the result depends only on input history and tick count.

    While a dialogue session is open the system does nothing at
    all; nothing is buffered, so keys held during a conversation
    cannot make the player jump when it ends.
    """

    required_components = [Transform, PlayerControl]

    def __init__(self, state: GameState, input_handler: InputHandler):
        super().__init__()
        self.state = state
        self.input = input_handler

    def update(self, dt: float) -> None:
        if self.state.session is not None:
            return
        super().update(dt)

    def process_entity(self, entity: Entity, dt: float) -> None:
        transform = entity.get(Transform)
        speed = entity.get(PlayerControl).speed
        dx, dy = self.input.get_movement_vector()

        transform.move_to(*self.state.settings.clamp(
            transform.x + dx * speed,
            transform.y + dy * speed,
        ))
