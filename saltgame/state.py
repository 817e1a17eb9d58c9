"""
Game state and its read-only render view.

GameState is the single source of truth for the meeting scene:
the world, the player, the ordered roster, the dialogue session
and the display scale. Every system gets the same instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from saltengine.core import Entity, EventBus, World
from saltgame.components import (
    Anchor,
    DialogueSession,
    DialogueState,
    Encounter,
    GameProgress,
    Persona,
    Transform,
)
from saltgame.config import SceneSettings
from saltgame.roster import CharacterSpec, create_character, create_player, load_roster


@dataclass(frozen=True)
class CharacterView:
    character_id: str
    name: str
    glyph: str
    x: float
    y: float
    visible: bool


@dataclass(frozen=True)
class DialogueView:
    character_id: str
    name: str
    glyph: str
    text: str
    line_index: int
    is_last_line: bool


@dataclass(frozen=True)
class SceneView:
    """
    Snapshot handed to the renderer. Nothing in it refers back to
    live state, so drawing can never change the game.
    """
    player: tuple[float, float]
    characters: tuple[CharacterView, ...]
    dialogue: DialogueView | None
    met_count: int
    total: int
    stage: int
    scale: float
    joystick: tuple[float, float]
    nearby: str | None
    touch_controls: bool


class GameState:
    """
    Everything the meeting scene knows.

    Attributes:
        settings: Gameplay constants
        world: Entity store
        player: The player entity
        roster: Character entities in roster order
        session: Active dialogue, or None
        scale: Display scale from pinch gestures
        nearby: Character the player could talk to right now
        touch_controls: Whether on-screen touch controls are shown
    """

    def __init__(
        self,
        settings: SceneSettings | None = None,
        roster: Iterable[CharacterSpec] | None = None,
        event_bus: EventBus | None = None,
    ):
        self.settings = settings or SceneSettings()
        self.world = World(event_bus)
        self.player = create_player(self.world, self.settings)

        specs = load_roster() if roster is None else list(roster)
        self.roster: list[Entity] = [create_character(self.world, spec) for spec in specs]

        self.session: DialogueSession | None = None
        self.scale = 1.0
        self.nearby: Entity | None = None
        self.touch_controls = False
        self.joystick: tuple[float, float] = (0.0, 0.0)

    @property
    def event_bus(self) -> EventBus:
        return self.world.event_bus

    @property
    def dialogue_state(self) -> DialogueState:
        return DialogueState.TALKING if self.session else DialogueState.IDLE

    @property
    def player_transform(self) -> Transform:
        return self.player.get(Transform)

    @property
    def progress(self) -> GameProgress:
        return self.player.get(GameProgress)

    @property
    def stage(self) -> int:
        return self.progress.stage

    @property
    def met_count(self) -> int:
        return sum(1 for c in self.roster if c.get(Encounter).met)

    def character(self, character_id: str) -> Entity:
        """
        Get a roster character by id.

        Raises:
            KeyError: If no character has that id
        """
        for entity in self.roster:
            if entity.get(Persona).character_id == character_id:
                return entity
        raise KeyError(f"No character with id {character_id!r}")

    def unmet(self) -> Iterable[Entity]:
        """Characters not yet met, in roster order."""
        return (c for c in self.roster if not c.get(Encounter).met)

    def snapshot(self) -> SceneView:
        """Build the read-only view for the renderer."""
        characters = []
        for entity in self.roster:
            persona = entity.get(Persona)
            anchor = entity.get(Anchor)
            characters.append(CharacterView(
                character_id=persona.character_id,
                name=persona.name,
                glyph=persona.glyph,
                x=anchor.x,
                y=anchor.y,
                visible=not entity.get(Encounter).met,
            ))

        dialogue = None
        if self.session is not None:
            persona = self.session.persona
            dialogue = DialogueView(
                character_id=persona.character_id,
                name=persona.name,
                glyph=persona.glyph,
                text=self.session.text,
                line_index=self.session.line_index,
                is_last_line=self.session.is_last_line,
            )

        return SceneView(
            player=self.player_transform.position,
            characters=tuple(characters),
            dialogue=dialogue,
            met_count=self.met_count,
            total=len(self.roster),
            stage=self.stage,
            scale=self.scale,
            joystick=self.joystick,
            nearby=self.nearby.get(Persona).character_id if self.nearby else None,
            touch_controls=self.touch_controls,
        )
