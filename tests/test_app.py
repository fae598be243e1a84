import pygame
import pytest

from hitlanes.app import App, clamp_delta_time, key_to_button, main
from hitlanes.input import Key


def _event(kind, **attrs):
    return pygame.event.Event(kind, **attrs)


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_a, Key.A),
        (pygame.K_z, Key.Z),
        (pygame.K_0, Key.NR0),
        (pygame.K_9, Key.NR9),
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_LALT, Key.LEFT_ALT),
    ],
)
def test_key_to_button(key, expected):
    assert key_to_button(key) == expected


def test_untracked_key():
    assert key_to_button(pygame.K_F5) is None


def test_clamp_delta_time():
    assert clamp_delta_time(0.5) == pytest.approx(1.0 / 10)
    assert clamp_delta_time(0.02) == 0.02


def test_key_press_and_release():
    app = App()
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_d, unicode="d"))
    app.input_state.update_all_buttons(0.01)
    assert app.input_state.is_button_pressed(Key.D)
    assert app.input_state.is_button_held(Key.D)
    assert app.input_state.typed_input == "d"
    app.handle_event(_event(pygame.KEYUP, key=pygame.K_d))
    app.input_state.update_all_buttons(0.01)
    assert app.input_state.is_button_released(Key.D)
    assert not app.input_state.is_button_held(Key.D)


def test_repeat_does_not_press_again_but_types():
    app = App()
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_BACKSPACE, unicode="\b"))
    app.input_state.update_all_buttons(0.01)
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_BACKSPACE, unicode="\b"))
    assert app.input_state.typed_input == "\b\b"


def test_repeated_letter_keeps_held_without_press():
    app = App()
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_j, unicode="j"))
    app.input_state.update_all_buttons(0.01)
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_j, unicode="j"))
    app.input_state.update_all_buttons(0.01)
    assert not app.input_state.is_button_pressed(Key.J)
    assert app.input_state.is_button_held(Key.J)


def test_mouse_buttons():
    app = App()
    app.handle_event(_event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    app.handle_event(_event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    app.input_state.update_all_buttons(0.01)
    assert app.input_state.left_mouse.pressed
    assert app.input_state.right_mouse.held


def test_focus_lost_resets_inputs():
    app = App()
    app.handle_event(_event(pygame.KEYDOWN, key=pygame.K_f, unicode="f"))
    app.input_state.update_all_buttons(0.01)
    app.handle_event(_event(pygame.WINDOWFOCUSLOST))
    assert app.window_focus is False
    assert not app.input_state.is_button_held(Key.F)
    assert app.input_state.typed_input == ""
    app.handle_event(_event(pygame.WINDOWFOCUSGAINED))
    assert app.window_focus is True


def test_mouse_motion_and_quit():
    app = App()
    app.handle_event(_event(pygame.MOUSEMOTION, pos=(3, 4), rel=(1, 1), buttons=(0, 0, 0)))
    assert app.mouse_moved is True
    app.handle_event(_event(pygame.QUIT))
    assert app.running is False


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])