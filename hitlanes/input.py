"""Keyboard, mouse and gamepad button state."""

import copy
import string
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from .strings import strlcpy

TYPED_INITIAL_DELAY = 0.48
TYPED_REPEAT_DELAY = 0.07
TYPED_INPUT_SIZE = 20

Key = IntEnum(
    "Key",
    list(string.ascii_uppercase)
    + [f"NR{i}" for i in range(10)]
    + [
        "SPACE",
        "ENTER",
        "ESCAPE",
        "UP",
        "DOWN",
        "LEFT",
        "RIGHT",
        "LEFT_CTRL",
        "TAB",
        "LEFT_SHIFT",
        "LEFT_ALT",
    ],
    start=0,
)
Key.__doc__ = "Keyboard keys tracked by the input layer."

BUTTONS_COUNT = len(Key)


class ControllerButton(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_THUMB = 9
    RIGHT_THUMB = 10
    UP = 11
    RIGHT = 12
    DOWN = 13
    LEFT = 14


CONTROLLER_BUTTONS_COUNT = len(ControllerButton)


@dataclass
class Button:
    """State of one button across frames, with key-repeat ``typed`` events."""

    pressed: bool = False
    held: bool = False
    released: bool = False
    new_state: int = -1
    typed: bool = False
    typed_time: float = 0.0

    def merge(self, other: "Button") -> None:
        self.pressed |= other.pressed
        self.released |= other.released
        self.held |= other.held

    def reset(self) -> None:
        self.pressed = False
        self.held = False
        self.released = False

    def process_event(self, new_state: bool) -> None:
        """Record a press (true) or release (false) to apply on the next update."""
        self.new_state = int(bool(new_state))

    def update(self, delta_time: float) -> None:
        """Advance one frame, applying any pending event."""
        if self.new_state == 1:
            self.pressed = not self.held
            self.held = True
            self.released = False
        elif self.new_state == 0:
            self.held = False
            self.pressed = False
            self.released = True
        else:
            self.pressed = False
            self.released = False

        if self.pressed:
            self.typed = True
            self.typed_time = TYPED_INITIAL_DELAY
        elif self.held:
            self.typed_time -= delta_time
            if self.typed_time < 0.0:
                self.typed_time += TYPED_REPEAT_DELAY
                self.typed = True
            else:
                self.typed = False
        else:
            self.typed_time = 0.0
            self.typed = False

        self.new_state = -1


@dataclass
class Stick:
    x: float = 0.0
    y: float = 0.0


def _controller_buttons() -> list[Button]:
    return [Button() for _ in ControllerButton]


@dataclass
class Controller:
    buttons: list[Button] = field(default_factory=_controller_buttons)
    lt: float = 0.0
    rt: float = 0.0
    l_stick: Stick = field(default_factory=Stick)
    r_stick: Stick = field(default_factory=Stick)

    def reset(self) -> None:
        """Return every button and axis to its initial state."""
        self.buttons = _controller_buttons()
        self.lt = 0.0
        self.rt = 0.0
        self.l_stick = Stick()
        self.r_stick = Stick()


@dataclass
class GamepadState:
    """One poll of a gamepad: pressed flags per button and axis values."""

    buttons: Sequence[bool] = field(default_factory=lambda: (False,) * CONTROLLER_BUTTONS_COUNT)
    left_x: float = 0.0
    left_y: float = 0.0
    right_x: float = 0.0
    right_y: float = 0.0
    left_trigger: float = 0.0
    right_trigger: float = 0.0


def _keyboard() -> list[Button]:
    return [Button() for _ in Key]


@dataclass
class Input:
    """Input snapshot handed to the game each frame."""

    l_mouse: Button = field(default_factory=Button)
    r_mouse: Button = field(default_factory=Button)
    mouse_x: int = 0
    mouse_y: int = 0
    buttons: list[Button] = field(default_factory=_keyboard)
    typed_input: str = ""
    delta_time: float = 0.0
    has_focus: bool = False
    controller: Controller = field(default_factory=Controller)

    def is_button_held(self, key: int) -> bool:
        return self.buttons[key].held

    def is_button_pressed(self, key: int) -> bool:
        return self.buttons[key].pressed

    def is_button_released(self, key: int) -> bool:
        return self.buttons[key].released

    def is_button_typed(self, key: int) -> bool:
        return self.buttons[key].typed

    def is_lmouse_pressed(self) -> bool:
        return self.l_mouse.pressed

    def is_rmouse_pressed(self) -> bool:
        return self.r_mouse.pressed

    def is_lmouse_released(self) -> bool:
        return self.l_mouse.released

    def is_rmouse_released(self) -> bool:
        return self.r_mouse.released

    def is_lmouse_held(self) -> bool:
        return self.l_mouse.held

    def is_rmouse_held(self) -> bool:
        return self.r_mouse.held


class InputState:
    """Live input state fed by window events and advanced once per frame."""

    def __init__(self) -> None:
        self.keyboard = _keyboard()
        self.left_mouse = Button()
        self.right_mouse = Button()
        self.controller = Controller()
        self.typed_input = ""

    def _key(self, key: int) -> Optional[Button]:
        if 0 <= key < BUTTONS_COUNT:
            return self.keyboard[key]
        return None

    def is_button_held(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.held)

    def is_button_pressed(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.pressed)

    def is_button_released(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.released)

    def is_button_typed(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.typed)

    def set_button_state(self, button: int, new_state: bool) -> None:
        self.keyboard[button].process_event(new_state)

    def set_left_mouse_state(self, new_state: bool) -> None:
        self.left_mouse.process_event(new_state)

    def set_right_mouse_state(self, new_state: bool) -> None:
        self.right_mouse.process_event(new_state)

    def get_controller_buttons(self, has_focus: bool) -> Controller:
        """A copy of the controller state, or an idle controller without focus."""
        return copy.deepcopy(self.controller) if has_focus else Controller()

    def update_all_buttons(self, delta_time: float, gamepad: Optional[GamepadState] = None) -> None:
        """Advance every button one frame and take in a gamepad poll if given."""
        for button in self.keyboard:
            button.update(delta_time)
        self.left_mouse.update(delta_time)
        self.right_mouse.update(delta_time)

        if gamepad is None:
            return
        for button, pressed in zip(self.controller.buttons, gamepad.buttons):
            button.process_event(pressed)
            button.update(delta_time)
        self.controller.lt = gamepad.right_trigger
        self.controller.rt = gamepad.left_trigger
        self.controller.l_stick = Stick(gamepad.left_x, gamepad.left_y)
        self.controller.r_stick = Stick(gamepad.right_x, gamepad.right_y)

    def reset_inputs_to_zero(self) -> None:
        self.reset_typed_input()
        for button in self.keyboard:
            button.reset()
        self.left_mouse.reset()
        self.right_mouse.reset()
        self.controller.reset()

    def add_to_typed_input(self, c) -> None:
        """Append one character, given as a string or a code point."""
        self.typed_input += chr(c) if isinstance(c, int) else c

    def reset_typed_input(self) -> None:
        self.typed_input = ""

    def snapshot(self, delta_time: float, has_focus: bool, mouse_x: int, mouse_y: int) -> Input:
        """Build an independent Input for the current frame."""
        return Input(
            l_mouse=copy.copy(self.left_mouse),
            r_mouse=copy.copy(self.right_mouse),
            mouse_x=mouse_x,
            mouse_y=mouse_y,
            buttons=[copy.copy(button) for button in self.keyboard],
            typed_input=strlcpy(self.typed_input, TYPED_INPUT_SIZE),
            delta_time=delta_time,
            has_focus=has_focus,
            controller=self.get_controller_buttons(has_focus),
        )