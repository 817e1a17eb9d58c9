"""
Input handler with action-based abstraction.

Aggregates keyboard state and the virtual joystick into a single
movement intent, and turns key presses into Action events.

Usage:
    handler = InputHandler(event_bus)
    handler.key_down("ArrowRight")

    dx, dy = handler.get_movement_vector()   # (1.0, 0.0)

    event_bus.subscribe(InputEvent.ACTION_PRESSED, on_action)
"""

from __future__ import annotations

from enum import Enum

import pygame

from saltengine.core.actions import Action, DEFAULT_KEY_BINDINGS, KeyId, resolve_key
from saltengine.core.events import EventBus
from saltengine.input.gestures import PinchZoom
from saltengine.input.joystick import VirtualJoystick


class InputEvent(Enum):
    """Input-specific events."""
    ACTION_PRESSED = "input.action_pressed"
    ACTION_RELEASED = "input.action_released"


class InputHandler:
    """
    Keyboard and touch input aggregator.

    Key state is a mapping from key identifier to pressed flag.
    Actions are derived from it through the key bindings, so an
    action stays held while any one of its keys is down.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        joystick: VirtualJoystick | None = None,
        pinch: PinchZoom | None = None,
        joystick_scale: float = 0.1,
    ):
        self.event_bus = event_bus
        self.joystick = joystick or VirtualJoystick()
        self.pinch = pinch or PinchZoom()
        self.joystick_scale = joystick_scale

        self._keys: dict[KeyId, bool] = {}

        self._key_bindings = {a: list(keys) for a, keys in DEFAULT_KEY_BINDINGS.items()}
        self._reverse_key_bindings: dict[KeyId, list[Action]] = {}
        self._rebuild_reverse_bindings()

    def _rebuild_reverse_bindings(self) -> None:
        """Build reverse lookup: key -> actions."""
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    # Queries

    def is_key_pressed(self, key: KeyId) -> bool:
        return self._keys.get(resolve_key(key), False)

    def is_action_pressed(self, action: Action) -> bool:
        """Check if any key bound to an action is held."""
        return any(self._keys.get(k, False) for k in self._key_bindings.get(action, []))

    def get_movement_vector(self) -> tuple[float, float]:
        """
        Combined movement intent for this tick.

        Each held direction contributes a unit step (opposite
        directions cancel); the joystick vector is added on top,
        scaled by joystick_scale.

        Returns:
            (x, y) in units of "player speed"
        """
        x = 0.0
        y = 0.0

        if self.is_action_pressed(Action.MOVE_LEFT):
            x -= 1.0
        if self.is_action_pressed(Action.MOVE_RIGHT):
            x += 1.0
        if self.is_action_pressed(Action.MOVE_UP):
            y -= 1.0
        if self.is_action_pressed(Action.MOVE_DOWN):
            y += 1.0

        if self.joystick.active:
            x += self.joystick.x * self.joystick_scale
            y += self.joystick.y * self.joystick_scale

        return (x, y)

    # Key bindings

    def bind_key(self, action: Action, key: KeyId) -> None:
        key = resolve_key(key)
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)
        self._rebuild_reverse_bindings()

    def unbind_key(self, action: Action, key: KeyId) -> None:
        key = resolve_key(key)
        if key in self._key_bindings.get(action, []):
            self._key_bindings[action].remove(key)
        self._rebuild_reverse_bindings()

    def get_bindings(self, action: Action) -> list[KeyId]:
        return self._key_bindings.get(action, []).copy()

    # Raw input

    def key_down(self, key: KeyId) -> None:
        """Handle key press. Newly held actions are published."""
        key = resolve_key(key)
        held_before = self._held_actions(key)
        self._keys[key] = True

        for action in self._reverse_key_bindings.get(key, []):
            if action not in held_before:
                self._publish(InputEvent.ACTION_PRESSED, action)

    def key_up(self, key: KeyId) -> None:
        """Handle key release. Actions with no key left held are published."""
        key = resolve_key(key)
        if not self._keys.get(key):
            return
        self._keys[key] = False

        for action in self._reverse_key_bindings.get(key, []):
            if not self.is_action_pressed(action):
                self._publish(InputEvent.ACTION_RELEASED, action)

    def release_all(self) -> None:
        """Forget every held key and stop the joystick (e.g. on focus loss)."""
        for key in [k for k, pressed in self._keys.items() if pressed]:
            self.key_up(key)
        self.joystick.end()

    def process_event(self, event: pygame.event.Event) -> bool:
        """
        Process a pygame keyboard event.

        Returns:
            True if the event was a key event
        """
        if event.type == pygame.KEYDOWN:
            self.key_down(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.key_up(event.key)
            return True
        if event.type == pygame.WINDOWFOCUSLOST:
            self.release_all()
        return False

    def _held_actions(self, key: KeyId) -> set[Action]:
        return {
            action for action in self._reverse_key_bindings.get(key, [])
            if self.is_action_pressed(action)
        }

    def _publish(self, event_type: InputEvent, action: Action) -> None:
        if self.event_bus:
            self.event_bus.publish(event_type, action=action)
