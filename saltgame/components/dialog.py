"""
Dialogue session state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from saltengine.core.entity import Entity
from saltgame.components.character import Persona


class DialogueState(Enum):
    """State of the dialogue state machine."""
    IDLE = auto()
    TALKING = auto()


@dataclass
class DialogueSession:
    """
    The conversation in progress.

    Borrows the speaking character's entity; the roster owns it.
    The displayed text is always read from the speaker's Persona
    at line_index, never stored separately.

    Attributes:
        speaker: Character entity being talked to
        line_index: Index of the displayed line
    """
    speaker: Entity
    line_index: int = 0

    def __post_init__(self) -> None:
        count = self.persona.line_count
        if not 0 <= self.line_index < count:
            raise IndexError(
                f"Line {self.line_index} out of range for {self.persona.character_id} "
                f"({count} lines)"
            )

    @property
    def persona(self) -> Persona:
        return self.speaker.get(Persona)

    @property
    def text(self) -> str:
        return self.persona.dialogue[self.line_index]

    @property
    def is_last_line(self) -> bool:
        return self.line_index >= self.persona.line_count - 1
