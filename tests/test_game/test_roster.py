import json
import pytest
from saltgame.roster import (
    RosterError,
    create_character,
    create_player,
    load_roster,
)
from saltgame.components import (
    Anchor,
    Encounter,
    GameProgress,
    Persona,
    PlayerControl,
    Transform,
)
from saltgame.config import SceneSettings

@pytest.fixture
def write_roster(tmp_path):
    def _write(data):
        path = tmp_path / "characters.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return path
    return _write

def test_bundled_roster():
    specs = load_roster()

    assert [s.id for s in specs] == ["taph", "jason", "gaster", "nox"]
    taph = specs[0]
    assert (taph.position.x, taph.position.y) == (300, 250)
    assert len(taph.dialogue) == 7
    assert taph.dialogue[0] == "Привет! Я Taph из Forsaken!"
    assert [len(s.dialogue) for s in specs] == [7, 5, 5, 8]

def test_load_custom_roster(write_roster):
    path = write_roster([
        {"id": "a", "name": "A", "position": {"x": 1, "y": 2}, "dialogue": ["hi"]},
        {"id": "b", "name": "B", "position": {"x": 3, "y": 4}, "dialogue": []},
    ])

    specs = load_roster(path)

    assert [s.id for s in specs] == ["a", "b"]
    assert specs[1].dialogue == ()
    assert specs[0].emoji == ""

def test_missing_file(tmp_path):
    with pytest.raises(RosterError, match="not found"):
        load_roster(tmp_path / "nope.json")

def test_invalid_json(write_roster):
    with pytest.raises(RosterError, match="not valid JSON"):
        load_roster(write_roster("[{"))

def test_not_an_array(write_roster):
    with pytest.raises(RosterError, match="JSON array"):
        load_roster(write_roster({"id": "a"}))

def test_schema_violation(write_roster):
    path = write_roster([{"id": "a", "name": "A", "position": {"x": "left", "y": 2}, "dialogue": []}])
    with pytest.raises(RosterError, match="Character #0"):
        load_roster(path)

def test_missing_dialogue_field(write_roster):
    path = write_roster([{"id": "a", "name": "A", "position": {"x": 1, "y": 2}}])
    with pytest.raises(RosterError):
        load_roster(path)

def test_duplicate_ids(write_roster):
    entry = {"id": "a", "name": "A", "position": {"x": 1, "y": 2}, "dialogue": []}
    with pytest.raises(RosterError, match="Duplicate"):
        load_roster(write_roster([entry, entry]))

def test_roster_error_is_value_error():
    assert issubclass(RosterError, ValueError)

def test_create_character(world, make_spec):
    spec = make_spec("taph", 300, 250, dialogue=("one", "two"), name="Taph")
    character = create_character(world, spec)

    assert character.name == "taph"
    assert character.get(Anchor).position == (300, 250)
    persona = character.get(Persona)
    assert persona.character_id == "taph"
    assert persona.name == "Taph"
    assert persona.dialogue == ("one", "two")
    assert character.get(Encounter).met is False

def test_create_player(world):
    player = create_player(world, SceneSettings())

    assert player.name == "player"
    assert player.get(Transform).position == (100.0, 300.0)
    assert player.get(PlayerControl).speed == 3.0
    assert player.get(GameProgress).stage == 0

def test_create_player_clamps_start(world):
    player = create_player(world, SceneSettings(player_start=(2000, -40)))
    assert player.get(Transform).position == (750.0, 0.0)
