"""
Interaction system - proximity checks and the interact action.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from saltengine.core import Action, Entity, Event, System
from saltengine.input import InputEvent
from saltgame.components import Anchor, PlayerControl, Transform

if TYPE_CHECKING:
    from saltengine.core import World
    from saltgame.state import GameState
    from saltgame.systems.dialogue import DialogueManager

logger = logging.getLogger(__name__)


class InteractionSystem(System):
    """
    Turns interaction requests into dialogue.

    Responsibilities:
    - On interact with a dialogue open: advance it (no proximity check)
    - On interact otherwise: talk to the first unmet character, in
      roster order, strictly closer than the interaction radius
    - Every tick: remember which character that would be, for the
      on-screen prompt
    """

    required_components = [Transform, PlayerControl]

    def __init__(self, state: GameState, dialogue: DialogueManager):
        super().__init__()
        self.state = state
        self.dialogue = dialogue

    def on_add(self, world: World) -> None:
        super().on_add(world)
        world.event_bus.subscribe(InputEvent.ACTION_PRESSED, self._on_action)

    def on_remove(self) -> None:
        if self._world is not None:
            self._world.event_bus.unsubscribe(InputEvent.ACTION_PRESSED, self._on_action)
        super().on_remove()

    def find_candidate(self, player_t: Transform | None = None) -> Entity | None:
        """First unmet character within reach of player_t, in roster order."""
        if player_t is None:
            player_t = self.state.player_transform
        radius = self.state.settings.interaction_radius

        for character in self.state.unmet():
            if player_t.distance_to(character.get(Anchor)) < radius:
                return character
        return None

    def interact(self) -> None:
        """Handle one interaction request."""
        if self.dialogue.is_active:
            self.dialogue.advance()
            return

        character = self.find_candidate()
        if character is None:
            logger.debug("Interact at %s: nobody in reach", self.state.player_transform.position)
            return

        self.dialogue.begin(character)

    def update(self, dt: float) -> None:
        if self.dialogue.is_active:
            self.state.nearby = None
            return
        super().update(dt)

    def process_entity(self, entity: Entity, dt: float) -> None:
        self.state.nearby = self.find_candidate(entity.get(Transform))

    def _on_action(self, event: Event) -> None:
        if event.get("action") is Action.INTERACT:
            self.interact()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(characters={len(self.state.roster)})"
