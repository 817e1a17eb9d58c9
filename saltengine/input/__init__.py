"""Input handling module."""

from saltengine.input.handler import InputHandler, InputEvent
from saltengine.input.joystick import VirtualJoystick
from saltengine.input.gestures import PinchZoom

__all__ = [
    "InputHandler",
    "InputEvent",
    "VirtualJoystick",
    "PinchZoom",
]
