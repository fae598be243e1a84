"""Window, event loop and entry point of the game."""

import argparse
import time
from typing import Optional

import pygame

from .game import Game
from .input import CONTROLLER_BUTTONS_COUNT, GamepadState, InputState, Key

MAX_DELTA_TIME = 1.0 / 10
BACKSPACE = 8
FRAME_RATE = 60

_SPECIAL_KEYS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LCTRL: Key.LEFT_CTRL,
    pygame.K_TAB: Key.TAB,
    pygame.K_LSHIFT: Key.LEFT_SHIFT,
    pygame.K_LALT: Key.LEFT_ALT,
}


def key_to_button(key: int) -> Optional[Key]:
    """The tracked key for a pygame key code, or None if it is not tracked."""
    if pygame.K_a <= key <= pygame.K_z:
        return Key(Key.A + key - pygame.K_a)
    if pygame.K_0 <= key <= pygame.K_9:
        return Key(Key.NR0 + key - pygame.K_0)
    return _SPECIAL_KEYS.get(key)


def clamp_delta_time(delta_time: float) -> float:
    """Limit the frame time handed to the game so long stalls do not jump ahead."""
    return min(delta_time, MAX_DELTA_TIME)


class App:
    """Owns the window and feeds events into the input state and the game."""

    def __init__(self, resources: str = "resources", width: int = 500, height: int = 500, title: str = "geam") -> None:
        self.game = Game(resources)
        self.input_state = InputState()
        self.size = (width, height)
        self.title = title
        self.window_focus = True
        self.mouse_moved = False
        self.full_screen = False
        self.current_full_screen = False
        self.running = True
        self._down_keys: set[int] = set()
        self._windowed_size = (width, height)

    def handle_event(self, event: pygame.event.Event) -> None:
        kind = event.type
        if kind == pygame.QUIT:
            self.running = False
        elif kind == pygame.KEYDOWN:
            self._key_down(event)
        elif kind == pygame.KEYUP:
            self._down_keys.discard(event.key)
            button = key_to_button(event.key)
            if button is not None:
                self.input_state.set_button_state(button, False)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            pressed = kind == pygame.MOUSEBUTTONDOWN
            if event.button == 1:
                self.input_state.set_left_mouse_state(pressed)
            elif event.button == 3:
                self.input_state.set_right_mouse_state(pressed)
        elif kind == pygame.WINDOWFOCUSGAINED:
            self.window_focus = True
        elif kind == pygame.WINDOWFOCUSLOST:
            self.window_focus = False
            # Releases that happen while unfocused are never seen.
            self.input_state.reset_inputs_to_zero()
            self._down_keys.clear()
        elif kind in (pygame.VIDEORESIZE, pygame.WINDOWRESIZED):
            self.input_state.reset_inputs_to_zero()
        elif kind == pygame.MOUSEMOTION:
            self.mouse_moved = True

    def _key_down(self, event: pygame.event.Event) -> None:
        repeat = event.key in self._down_keys
        if event.key == pygame.K_BACKSPACE:
            self.input_state.add_to_typed_input(BACKSPACE)
        text = getattr(event, "unicode", "")
        if len(text) == 1 and 32 <= ord(text) < 127:
            self.input_state.add_to_typed_input(text)
        if repeat:
            return
        self._down_keys.add(event.key)
        button = key_to_button(event.key)
        if button is not None:
            self.input_state.set_button_state(button, True)

    def _poll_gamepad(self) -> Optional[GamepadState]:
        for index in range(pygame.joystick.get_count()):
            joystick = pygame.joystick.Joystick(index)
            button_count = joystick.get_numbuttons()
            axis_count = joystick.get_numaxes()
            buttons = [
                bool(joystick.get_button(b)) if b < button_count else False
                for b in range(CONTROLLER_BUTTONS_COUNT)
            ]
            axes = [joystick.get_axis(a) if a < axis_count else 0.0 for a in range(6)]
            return GamepadState(buttons, *axes)
        return None

    def _apply_full_screen(self) -> None:
        if not self.window_focus or self.current_full_screen == self.full_screen:
            return
        if self.full_screen:
            self._windowed_size = pygame.display.get_surface().get_size()
            pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.current_full_screen = True
        else:
            pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)
            self.current_full_screen = False

    def run(self) -> None:
        """Open the window and run frames until the window is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(self.size, pygame.RESIZABLE)
            pygame.display.set_caption(self.title)
            pygame.key.set_repeat(500, 30)
            if not self.game.init():
                return
            frame_clock = pygame.time.Clock()
            stop = time.perf_counter()
            while self.running:
                start = time.perf_counter()
                delta_time = start - stop
                stop = time.perf_counter()

                surface = pygame.display.get_surface()
                mouse_x, mouse_y = pygame.mouse.get_pos()
                input = self.input_state.snapshot(delta_time, self.window_focus, mouse_x, mouse_y)
                if not self.game.logic(surface, clamp_delta_time(delta_time), input):
                    break

                self._apply_full_screen()

                self.mouse_moved = False
                self.input_state.update_all_buttons(delta_time, self._poll_gamepad())
                self.input_state.reset_typed_input()

                pygame.display.flip()
                frame_clock.tick(FRAME_RATE)
                for event in pygame.event.get():
                    self.handle_event(event)
            self.game.close()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="hitlanes", description="Hit the lanes as the notes arrive.")
    parser.add_argument("--resources", default="resources", help="folder holding the game resources")
    args = parser.parse_args(argv)
    App(args.resources).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())