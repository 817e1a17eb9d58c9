"""
Input action definitions.

Actions abstract raw keys into semantic intents. Game logic asks
"is MOVE_LEFT held?", never "is K_a held?".

Keys can be named by pygame key code or by browser-style name
("ArrowLeft", "a", "A", " "). Names are folded to key codes by
resolve_key, so letter case never matters.
"""

from __future__ import annotations

from enum import Enum, auto

import pygame


class Action(Enum):
    """Semantic input actions."""

    # Movement
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()

    # Gameplay
    INTERACT = auto()

    # System
    QUIT = auto()
    DEBUG_TOGGLE = auto()


KeyId = int | str


DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.MOVE_UP: [pygame.K_UP, pygame.K_w],
    Action.MOVE_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
    Action.MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],

    Action.INTERACT: [pygame.K_SPACE, pygame.K_RETURN, pygame.K_e],

    Action.QUIT: [pygame.K_ESCAPE],
    Action.DEBUG_TOGGLE: [pygame.K_F3],
}

# Browser-style key names
KEY_NAMES: dict[str, int] = {
    "arrowup": pygame.K_UP,
    "arrowdown": pygame.K_DOWN,
    "arrowleft": pygame.K_LEFT,
    "arrowright": pygame.K_RIGHT,
    " ": pygame.K_SPACE,
    "space": pygame.K_SPACE,
    "enter": pygame.K_RETURN,
    "escape": pygame.K_ESCAPE,
    "f3": pygame.K_F3,
}


def resolve_key(key: KeyId) -> KeyId:
    """
    Normalize a key identifier to a pygame key code.

    Single letters map to their lowercase key code (pygame letter
    codes equal the lowercase ASCII value). Unknown names are
    returned folded to lowercase so they still work as identifiers.
    """
    if isinstance(key, int):
        return key

    folded = key.lower() if len(key) > 1 else key
    if folded in KEY_NAMES:
        return KEY_NAMES[folded]
    if len(key) == 1:
        return ord(key.lower())
    return folded
