"""
Meeting components - data-only definitions.

All components are pydantic models. Logic lives in Systems.
"""

from saltgame.components.transform import Transform, Anchor
from saltgame.components.character import Persona, Encounter, PlayerControl, GameProgress
from saltgame.components.dialog import DialogueSession, DialogueState

__all__ = [
    # Position
    "Transform",
    "Anchor",
    # Characters
    "Persona",
    "Encounter",
    "PlayerControl",
    "GameProgress",
    # Dialogue
    "DialogueSession",
    "DialogueState",
]
