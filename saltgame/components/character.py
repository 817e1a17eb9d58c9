"""
Character components - identity, lines and encounter state.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from saltengine.core.component import Component


class Persona(Component):
    """
    Who a character is and what it says.

    Attributes:
        character_id: Stable id ("taph")
        name: Display name
        glyph: Short symbol drawn on the sprite
        dialogue: Lines spoken, in order
    """
    model_config = ConfigDict(frozen=True)

    character_id: str = Field(min_length=1)
    name: str
    glyph: str = ""
    dialogue: tuple[str, ...] = ()

    @property
    def line_count(self) -> int:
        return len(self.dialogue)


class Encounter(Component):
    """
    Whether the player has finished talking to this character.

    Only DialogueManager sets met. Once True it stays True: setting
    it back to False raises ValueError.
    """
    met: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "met" and self.met and not value:
            raise ValueError("A met character cannot be unmet")
        super().__setattr__(name, value)


class PlayerControl(Component):
    """
    Marks the player-steered entity.

    Attributes:
        speed: Pixels per tick per unit of movement intent
    """
    speed: float = Field(3.0, gt=0)


class GameProgress(Component):
    """
    Encounter progress.

    Attributes:
        stage: Number of completed encounters
    """
    stage: int = Field(0, ge=0)
