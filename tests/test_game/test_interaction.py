import pytest
from saltgame.components import Anchor, DialogueState, Encounter, PlayerControl, Transform
from saltgame.controller import MeetingController

def test_interact_far_from_everyone_is_noop(controller):
    controller.interact()

    assert controller.state.session is None
    assert controller.state.stage == 0
    assert controller.state.player_transform.position == (100.0, 300.0)

def test_meeting_taph(controller):
    state = controller.state

    # Start position is about 206 px from Taph
    controller.interact()
    assert state.session is None

    state.player_transform.move_to(250, 260)
    controller.interact()

    assert state.dialogue_state is DialogueState.TALKING
    assert state.session.persona.character_id == "taph"
    assert state.session.line_index == 0
    assert state.session.text == "Привет! Я Taph из Forsaken!"

    for line in range(1, 7):
        controller.interact()
        assert state.dialogue_state is DialogueState.TALKING
        assert state.session.line_index == line

    controller.interact()

    assert state.dialogue_state is DialogueState.IDLE
    assert state.character("taph").get(Encounter).met
    assert state.stage == 1
    assert state.met_count == 1

def test_space_key_interacts(controller):
    controller.state.player_transform.move_to(250, 260)

    controller.key_down(" ")
    assert controller.state.session is not None

    controller.key_up(" ")
    controller.key_down("Enter")
    assert controller.state.session.line_index == 1

def test_held_key_repeat_does_not_advance(controller):
    controller.state.player_transform.move_to(250, 260)

    controller.key_down(" ")
    controller.key_down(" ")
    controller.key_down(" ")

    assert controller.state.session.line_index == 0

def test_radius_is_strict(settings, event_bus, make_spec):
    # Exactly 80 px away
    controller = MeetingController(settings, [make_spec("edge", 180, 300)], event_bus)
    controller.interact()
    assert controller.state.session is None

    controller.state.player_transform.move_to(101, 300)
    controller.interact()
    assert controller.state.session is not None

def test_first_in_roster_order_wins(settings, event_bus, make_spec):
    roster = [
        make_spec("second", 60, 300),
        make_spec("first", 110, 300),
    ]
    controller = MeetingController(settings, roster, event_bus)

    # "second" is listed first, even though "first" is closer
    controller.interact()
    assert controller.state.session.persona.character_id == "second"

def test_met_characters_are_skipped(settings, event_bus, make_spec):
    roster = [
        make_spec("a", 100, 300, dialogue=()),
        make_spec("b", 120, 300, dialogue=("hi",)),
    ]
    controller = MeetingController(settings, roster, event_bus)

    controller.interact()
    assert controller.state.character("a").get(Encounter).met
    assert controller.state.session is None

    controller.interact()
    assert controller.state.session.persona.character_id == "b"

def test_advance_ignores_distance(controller):
    state = controller.state
    state.player_transform.move_to(250, 260)
    controller.interact()

    state.player_transform.move_to(0, 0)
    controller.interact()

    assert state.session is not None
    assert state.session.line_index == 1

def test_nearby_tracks_candidate(controller):
    controller.tick()
    assert controller.view().nearby is None

    controller.state.player_transform.move_to(250, 260)
    controller.tick()
    assert controller.view().nearby == "taph"

    controller.interact()
    controller.tick()
    assert controller.view().nearby is None

def test_meet_everyone(controller):
    state = controller.state

    for character_id in ["taph", "jason", "gaster", "nox"]:
        x, y = state.character(character_id).get(Anchor).position
        state.player_transform.move_to(x, y)

        controller.interact()
        while state.session is not None:
            controller.interact()

    assert state.met_count == 4
    assert state.stage == 4
    assert all(not c.visible for c in controller.view().characters)

    # Nobody left to meet
    controller.interact()
    assert state.session is None
    assert state.stage == 4

def test_shutdown_detaches_interaction(controller):
    controller.state.player_transform.move_to(250, 260)
    controller.shutdown()

    controller.key_down(" ")
    assert controller.state.session is None

def test_prompt_is_computed_for_the_player_entity(controller):
    controlled = list(controller.state.world.get_entities_with(Transform, PlayerControl))
    assert controlled == [controller.state.player]

    controller.state.player_transform.move_to(250, 260)
    controller.interaction.process_entity(controller.state.player, 0.016)
    assert controller.state.nearby is controller.state.character("taph")

def test_inactive_player_gets_no_prompt(controller):
    controller.state.player_transform.move_to(250, 260)
    controller.state.player.active = False
    controller.tick()

    assert controller.view().nearby is None
