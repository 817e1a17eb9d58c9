"""
Character roster - loading and entity factories.

The roster lives in data/characters.json (a JSON array, in roster
order) and is validated against data/schemas/character.schema.json
before any entity is built.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
from pydantic import BaseModel, ConfigDict

from saltengine.core import Entity, World
from saltgame.components import (
    Anchor,
    Encounter,
    GameProgress,
    Persona,
    PlayerControl,
    Transform,
)
from saltgame.config import SceneSettings

logger = logging.getLogger(__name__)

DATA_PATH = Path(__file__).parent / "data"
ROSTER_FILE = DATA_PATH / "characters.json"
SCHEMA_FILE = DATA_PATH / "schemas" / "character.schema.json"


class RosterError(ValueError):
    """The roster file is missing, malformed or inconsistent."""


class ScenePoint(BaseModel):
    x: float
    y: float


class CharacterSpec(BaseModel):
    """One roster entry as stored on disk."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    position: ScenePoint
    dialogue: tuple[str, ...] = ()
    emoji: str = ""


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise RosterError(f"Roster file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise RosterError(f"Roster file {path} is not valid JSON: {e}") from e


def load_roster(
    path: Path | str = ROSTER_FILE,
    schema_path: Path | str = SCHEMA_FILE,
) -> list[CharacterSpec]:
    """
    Load and validate the roster.

    Args:
        path: JSON file holding an array of characters
        schema_path: JSON schema every character must satisfy

    Returns:
        Character specs in file order

    Raises:
        RosterError: If the file cannot be read, fails validation or
            repeats an id
    """
    path = Path(path)
    data = _read_json(path)
    schema = _read_json(Path(schema_path))

    if not isinstance(data, list):
        raise RosterError(f"Roster file {path} must contain a JSON array")

    specs: list[CharacterSpec] = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        try:
            jsonschema.validate(instance=item, schema=schema)
        except jsonschema.ValidationError as e:
            logger.error("Validation error in %s[%d]: %s", path, index, e.message)
            raise RosterError(f"Character #{index} in {path}: {e.message}") from e

        spec = CharacterSpec.model_validate(item)
        if spec.id in seen:
            raise RosterError(f"Duplicate character id {spec.id!r} in {path}")
        seen.add(spec.id)
        specs.append(spec)

    logger.info("Loaded %d characters from %s", len(specs), path.name)
    return specs


def create_character(world: World, spec: CharacterSpec) -> Entity:
    """
    Factory function to create a stationary character entity.

    Args:
        world: World to add the character to
        spec: Roster entry

    Returns:
        The created character entity
    """
    character = world.create_entity(spec.id)
    character.add(Anchor(x=spec.position.x, y=spec.position.y))
    character.add(Persona(
        character_id=spec.id,
        name=spec.name,
        glyph=spec.emoji,
        dialogue=spec.dialogue,
    ))
    character.add(Encounter())
    return character


def create_player(world: World, settings: SceneSettings) -> Entity:
    """
    Factory function to create the player entity at its start position.
    """
    player = world.create_entity("player")
    x, y = settings.clamp(*settings.player_start)
    player.add(Transform(x=x, y=y))
    player.add(PlayerControl(speed=settings.player_speed))
    player.add(GameProgress())
    return player
