"""
Dialogue manager - the IDLE/TALKING state machine.

    IDLE --begin(character)--> TALKING (line 0)
    TALKING --advance, not on last line--> TALKING (line + 1)
    TALKING --advance, on last line--> IDLE (met, stage + 1)

A character with no lines completes as soon as it is begun.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from saltgame.components import DialogueSession, DialogueState, Encounter, Persona
from saltgame.events import MeetingEvent

if TYPE_CHECKING:
    from saltengine.core import Entity
    from saltgame.state import GameState

logger = logging.getLogger(__name__)


class DialogueManager:
    """
    Owns the dialogue session on a GameState.

    Usage:
        dialogue = DialogueManager(state)
        dialogue.begin(state.character("taph"))
        while dialogue.is_active:
            dialogue.advance()
    """

    def __init__(self, state: GameState):
        self.state = state

    @property
    def current_state(self) -> DialogueState:
        return self.state.dialogue_state

    @property
    def is_active(self) -> bool:
        return self.state.session is not None

    @property
    def displayed_text(self) -> str | None:
        """Line on screen, read from the speaker every time."""
        session = self.state.session
        return session.text if session else None

    def begin(self, character: Entity) -> None:
        """
        Start talking to a character.

        Raises:
            RuntimeError: If a session is already open
        """
        if self.state.session is not None:
            raise RuntimeError("A dialogue session is already active")

        persona = character.get(Persona)
        if persona.line_count == 0:
            logger.info("%s has nothing to say", persona.name)
            self._complete(character)
            return

        self.state.session = DialogueSession(speaker=character)
        logger.info("Dialogue started with %s", persona.name)
        self.state.event_bus.publish(
            MeetingEvent.DIALOGUE_STARTED,
            character_id=persona.character_id,
            line_index=0,
        )

    def advance(self) -> bool:
        """
        Acknowledge the displayed line.

        Returns:
            True if a session was open, False if there was nothing to advance
        """
        session = self.state.session
        if session is None:
            return False

        if not session.is_last_line:
            session.line_index += 1
            logger.debug("%s line %d", session.persona.character_id, session.line_index)
            self.state.event_bus.publish(
                MeetingEvent.LINE_ADVANCED,
                character_id=session.persona.character_id,
                line_index=session.line_index,
            )
            return True

        self.state.session = None
        self.state.event_bus.publish(
            MeetingEvent.DIALOGUE_ENDED,
            character_id=session.persona.character_id,
        )
        self._complete(session.speaker)
        return True

    def _complete(self, character: Entity) -> None:
        encounter = character.get(Encounter)
        if encounter.met:
            return

        encounter.met = True
        progress = self.state.progress
        progress.stage += 1

        persona = character.get(Persona)
        logger.info(
            "Met %s (%d/%d), stage %d",
            persona.name, self.state.met_count, len(self.state.roster), progress.stage,
        )
        self.state.event_bus.publish(
            MeetingEvent.CHARACTER_MET,
            character_id=persona.character_id,
            met_count=self.state.met_count,
        )
        self.state.event_bus.publish(MeetingEvent.STAGE_ADVANCED, stage=progress.stage)
