import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure the packages can be imported from a source checkout
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.quit'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.time'), \
         patch('pygame.key'), \
         patch('pygame.mouse'), \
         patch('pygame.font'), \
         patch('pygame.Surface'):

        import pygame
        pygame.time.get_ticks = MagicMock(return_value=0)

        yield

@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from saltengine.core.events import EventBus
    return EventBus()

@pytest.fixture
def world(event_bus):
    """Fresh World for each test."""
    from saltengine.core.world import World
    return World(event_bus)

@pytest.fixture
def settings():
    from saltgame.config import SceneSettings
    return SceneSettings()

@pytest.fixture
def controller(settings, event_bus):
    """Controller wired with the bundled four-character roster."""
    from saltgame.controller import MeetingController
    return MeetingController(settings, event_bus=event_bus)

@pytest.fixture
def make_spec():
    """Build a CharacterSpec from keyword arguments."""
    from saltgame.roster import CharacterSpec

    def _make(id, x, y, dialogue=("Hello",), name=None):
        return CharacterSpec.model_validate({
            "id": id,
            "name": name or id.title(),
            "position": {"x": x, "y": y},
            "dialogue": list(dialogue),
        })

    return _make
