import pytest
from saltgame.components import DialogueState, Encounter
from saltgame.controller import MeetingController
from saltgame.events import MeetingEvent

@pytest.fixture
def make_controller(settings, event_bus, make_spec):
    def _make(*lines_per_character):
        roster = [
            make_spec(f"c{i}", 100, 300, dialogue=lines)
            for i, lines in enumerate(lines_per_character)
        ]
        return MeetingController(settings, roster, event_bus)
    return _make

@pytest.fixture
def events(event_bus):
    log = []
    for event_type in MeetingEvent:
        event_bus.subscribe(event_type, lambda e: log.append((e.type, dict(e.data))), weak=False)
    return log

def test_starts_idle(make_controller):
    controller = make_controller(("one",))
    assert controller.dialogue.current_state is DialogueState.IDLE
    assert controller.dialogue.displayed_text is None
    assert controller.dialogue.advance() is False

def test_begin_shows_first_line(make_controller, events):
    controller = make_controller(("one", "two", "three"))
    character = controller.state.character("c0")

    controller.dialogue.begin(character)

    assert controller.dialogue.current_state is DialogueState.TALKING
    assert controller.dialogue.displayed_text == "one"
    assert controller.state.session.speaker is character
    assert events == [(MeetingEvent.DIALOGUE_STARTED, {"character_id": "c0", "line_index": 0})]

def test_full_conversation(make_controller, events):
    lines = ("one", "two", "three")
    controller = make_controller(lines)
    character = controller.state.character("c0")
    controller.dialogue.begin(character)

    for expected in lines[1:]:
        assert controller.dialogue.advance()
        assert controller.dialogue.displayed_text == expected
        assert not character.get(Encounter).met
        assert controller.state.stage == 0

    assert controller.dialogue.advance()

    assert controller.dialogue.current_state is DialogueState.IDLE
    assert character.get(Encounter).met
    assert controller.state.stage == 1
    assert [t for t, _ in events] == [
        MeetingEvent.DIALOGUE_STARTED,
        MeetingEvent.LINE_ADVANCED,
        MeetingEvent.LINE_ADVANCED,
        MeetingEvent.DIALOGUE_ENDED,
        MeetingEvent.CHARACTER_MET,
        MeetingEvent.STAGE_ADVANCED,
    ]
    assert events[-2][1] == {"character_id": "c0", "met_count": 1}
    assert events[-1][1] == {"stage": 1}

def test_single_line_ends_on_first_advance(make_controller):
    controller = make_controller(("only",))
    controller.dialogue.begin(controller.state.character("c0"))
    assert controller.state.session.is_last_line

    controller.dialogue.advance()

    assert controller.state.session is None
    assert controller.state.met_count == 1

def test_empty_dialogue_completes_immediately(make_controller, events):
    controller = make_controller(())
    character = controller.state.character("c0")

    controller.dialogue.begin(character)

    assert controller.state.session is None
    assert character.get(Encounter).met
    assert controller.state.stage == 1
    assert MeetingEvent.DIALOGUE_STARTED not in [t for t, _ in events]

def test_begin_while_talking_is_an_error(make_controller):
    controller = make_controller(("one",), ("two",))
    controller.dialogue.begin(controller.state.character("c0"))

    with pytest.raises(RuntimeError):
        controller.dialogue.begin(controller.state.character("c1"))

def test_meeting_twice_does_not_count_twice(make_controller):
    controller = make_controller(())
    character = controller.state.character("c0")

    controller.dialogue.begin(character)
    controller.dialogue.begin(character)

    assert controller.state.stage == 1
    assert controller.state.met_count == 1

def test_stage_tracks_met_count(make_controller):
    controller = make_controller(("a",), ("b", "c"), ())

    for character in list(controller.state.roster):
        controller.dialogue.begin(character)
        while controller.dialogue.is_active:
            controller.dialogue.advance()
        assert controller.state.stage == controller.state.met_count

    assert controller.state.met_count == 3
