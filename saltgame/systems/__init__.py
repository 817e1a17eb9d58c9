"""
Meeting systems - logic-only processors.
"""

from saltgame.systems.movement import MovementSystem
from saltgame.systems.interaction import InteractionSystem
from saltgame.systems.dialogue import DialogueManager

__all__ = [
    "MovementSystem",
    "InteractionSystem",
    "DialogueManager",
]
