import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock
import pygame
from saltengine.core.events import EventBus
from saltgame.scenes import MeetingScene

@pytest.fixture
def game():
    game = MagicMock()
    game.event_bus = EventBus()
    game.width = 800
    game.height = 600
    game.debug_mode = False
    return game

@pytest.fixture
def scene(game):
    scene = MeetingScene(game)
    scene.on_enter()
    return scene

def key(event_type, code):
    return SimpleNamespace(type=event_type, key=code)

def mouse(event_type, pos, button=1):
    return SimpleNamespace(type=event_type, pos=pos, button=button)

def finger(event_type, finger_id, x, y):
    return SimpleNamespace(type=event_type, finger_id=finger_id, x=x, y=y)

def test_arrow_keys_move_player(scene):
    assert scene.handle_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    scene.update(0.016)
    scene.update(0.016)

    assert scene.state.player_transform.position == (106.0, 300.0)
    assert scene.controller.tick_count == 2

def test_escape_quits(scene, game):
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE))
    game.quit.assert_called_once()

def test_f3_toggles_debug(scene, game):
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_F3))
    assert game.debug_mode is True

    scene.handle_event(key(pygame.KEYUP, pygame.K_F3))
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_F3))
    assert game.debug_mode is False

def test_space_starts_dialogue(scene):
    scene.state.player_transform.move_to(250, 260)
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE))

    assert scene.state.session.persona.character_id == "taph"

def test_click_on_dialogue_box_advances(scene):
    scene.state.player_transform.move_to(250, 260)
    scene.controller.interact()

    assert scene.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 550)))
    assert scene.state.session.line_index == 1

def test_click_outside_dialogue_is_ignored(scene):
    scene.state.player_transform.move_to(250, 260)
    scene.controller.interact()

    assert not scene.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 100)))
    assert scene.state.session.line_index == 0

def test_touch_controls_hidden_until_touch(scene):
    pad = scene.renderer.joystick_center((800, 600))
    assert not scene.handle_event(mouse(pygame.MOUSEBUTTONDOWN, pad))
    assert not scene.controller.input.joystick.active

def test_joystick_drag(scene):
    scene.controller.enable_touch_controls()
    cx, cy = scene.renderer.joystick_center((800, 600))

    assert scene.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (cx, cy)))
    scene.handle_event(mouse(pygame.MOUSEMOTION, (cx + 200, cy)))
    assert scene.controller.view().joystick == (50.0, 0.0)

    scene.update(0.016)
    assert scene.state.player_transform.position == pytest.approx((115.0, 300.0))

    assert scene.handle_event(mouse(pygame.MOUSEBUTTONUP, (cx + 200, cy)))
    assert scene.controller.view().joystick == (0.0, 0.0)

def test_interact_button(scene):
    scene.controller.enable_touch_controls()
    scene.state.player_transform.move_to(250, 260)

    assert scene.handle_event(mouse(pygame.MOUSEBUTTONDOWN, scene.renderer.button_center((800, 600))))
    assert scene.state.session is not None

def test_pinch_zoom(scene):
    scene.handle_event(finger(pygame.FINGERDOWN, 0, 0.25, 0.5))
    scene.handle_event(finger(pygame.FINGERDOWN, 1, 0.75, 0.5))
    scene.handle_event(finger(pygame.FINGERMOTION, 1, 0.875, 0.5))

    view = scene.controller.view()
    assert view.touch_controls
    assert view.scale == pytest.approx(1.25)

    scene.handle_event(finger(pygame.FINGERUP, 1, 0.875, 0.5))
    scene.handle_event(finger(pygame.FINGERMOTION, 0, 0.1, 0.5))
    assert scene.controller.view().scale == pytest.approx(1.25)

def test_pinch_does_not_touch_gameplay(scene):
    scene.handle_event(finger(pygame.FINGERDOWN, 0, 0.25, 0.5))
    scene.handle_event(finger(pygame.FINGERDOWN, 1, 0.75, 0.5))
    scene.handle_event(finger(pygame.FINGERMOTION, 1, 1.0, 0.5))
    scene.update(0.016)

    assert scene.state.player_transform.position == (100.0, 300.0)
    assert scene.state.stage == 0

def test_exit_unsubscribes(scene, game):
    scene.on_exit()
    scene.handle_event(key(pygame.KEYDOWN, pygame.K_ESCAPE))
    game.quit.assert_not_called()

def test_destroy_stops_interaction(scene):
    scene.state.player_transform.move_to(250, 260)
    scene.on_exit()
    scene.on_destroy()

    scene.handle_event(key(pygame.KEYDOWN, pygame.K_SPACE))
    assert scene.state.session is None
