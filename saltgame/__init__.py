"""
Silent Salt: Meetings

Walk around the scene, find each character and listen to what
they have to say. Built on the saltengine package.

Layers:
- config: SceneSettings gameplay constants
- components: data-only pydantic components
- roster: character data loading and entity factories
- state: GameState and the read-only SceneView
- systems: movement, interaction and dialogue logic
- controller: the input boundary (no display needed)
- scenes/render: pygame adapter and drawing
"""

__version__ = "0.1.0"

from saltgame.config import SceneSettings
from saltgame.controller import MeetingController
from saltgame.events import MeetingEvent
from saltgame.roster import CharacterSpec, RosterError, load_roster
from saltgame.state import GameState, SceneView

__all__ = [
    "SceneSettings",
    "MeetingController",
    "MeetingEvent",
    "CharacterSpec",
    "RosterError",
    "load_roster",
    "GameState",
    "SceneView",
]
