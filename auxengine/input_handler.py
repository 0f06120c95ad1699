"""Input tracking for keyboards, mice and gamepads, with callback bindings.

Raw input events are fed in through the ``process_*`` methods. Each button
or axis keeps its last two events and a cached action. Bound callbacks fire
from :meth:`InputHandler.execute_input_bindings`, at most once per change of
the cached action.
"""

from __future__ import annotations

import enum
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, NamedTuple, Union

_U32 = 0xFFFFFFFF


class GamepadId(enum.IntEnum):
    GAMEPAD_1 = 0
    GAMEPAD_2 = 1
    GAMEPAD_3 = 2
    GAMEPAD_4 = 3
    GAMEPAD_5 = 4
    GAMEPAD_6 = 5
    GAMEPAD_7 = 6
    GAMEPAD_8 = 7
    GAMEPAD_9 = 8
    GAMEPAD_10 = 9
    GAMEPAD_11 = 10
    GAMEPAD_12 = 11
    GAMEPAD_13 = 12
    GAMEPAD_14 = 13
    GAMEPAD_15 = 14
    GAMEPAD_16 = 15
    MAX = 16


class GamepadButton(enum.IntEnum):
    UNKNOWN = -1
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
    DPAD_UP = 11
    DPAD_RIGHT = 12
    DPAD_DOWN = 13
    DPAD_LEFT = 14
    MAX = 15
    CROSS = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3


class GamepadAxis(enum.IntEnum):
    UNKNOWN = -1
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5
    MAX = 6


class Key(enum.IntEnum):
    UNKNOWN = -1
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    NUMPAD_0 = 320
    NUMPAD_1 = 321
    NUMPAD_2 = 322
    NUMPAD_3 = 323
    NUMPAD_4 = 324
    NUMPAD_5 = 325
    NUMPAD_6 = 326
    NUMPAD_7 = 327
    NUMPAD_8 = 328
    NUMPAD_9 = 329
    NUMPAD_DECIMAL = 330
    NUMPAD_DIVIDE = 331
    NUMPAD_MULTIPLY = 332
    NUMPAD_SUBTRACT = 333
    NUMPAD_ADD = 334
    NUMPAD_ENTER = 335
    NUMPAD_EQUAL = 336
    SHIFT_LEFT = 340
    CONTROL_LEFT = 341
    ALT_LEFT = 342
    SUPER_LEFT = 343
    SHIFT_RIGHT = 344
    CONTROL_RIGHT = 345
    ALT_RIGHT = 346
    SUPER_RIGHT = 347
    MENU = 348
    MAX = 349


class MouseButton(enum.IntEnum):
    UNKNOWN = -1
    BUTTON_1 = 0  # usually left
    BUTTON_2 = 1  # usually right
    BUTTON_3 = 2  # usually middle
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    MAX = 8


class MouseScrollAxis(enum.IntEnum):
    X = 0
    Y = 1
    MAX = 2


class InputAction(enum.IntEnum):
    """The physical action done by the user."""

    UNKNOWN = -1
    RELEASED = 0
    PRESSED = 1
    CLICKED = 2


class AxisAction(enum.IntEnum):
    UNKNOWN = -1
    TILTED = 0
    FLICKED = 1


class InputDevice(enum.IntEnum):
    KEYBOARD = 0
    MOUSE = 1
    GAMEPAD = 2
    OTHER = 3


@dataclass
class InputEvent:
    """One raw input: a button or axis id, its action, axis value and time in ms."""

    button: int = -1
    action: int = 0
    value: float = 0.0
    timestamp: int = 0


@dataclass
class InputInstance:
    """Tracked state of one button or axis."""

    prev_event: InputEvent = field(default_factory=InputEvent)
    curr_event: InputEvent = field(default_factory=InputEvent)
    cached_action: Union[InputAction, int] = InputAction.UNKNOWN
    cached_axis_action: Union[AxisAction, int] = AxisAction.UNKNOWN
    is_consumed: bool = False
    accumulated_hold_time: int = 0


InputCallback = Callable[[int, int], Any]
AxisCallback = Callable[[int, int, float], Any]


class _Binding(NamedTuple):
    callback: Callable[..., Any]
    action: int


def _as_action(value: int) -> Union[InputAction, int]:
    try:
        return InputAction(value)
    except ValueError:
        return value


class InputHandler:
    """Tracks input devices, button and axis state, and callback bindings."""

    CLICK_TIME: ClassVar[int] = 350
    MAX_GAMEPAD_COUNT: ClassVar[int] = 16
    MAX_INPUT_DEVICE_COUNT: ClassVar[int] = 18
    KEYBOARD_INDEX: ClassVar[int] = 16
    MOUSE_INDEX: ClassVar[int] = 17
    DEADZONE_THUMBSTICK: ClassVar[float] = 0.25
    # Neutral trigger values start at -1.0.
    DEADZONE_TRIGGER: ClassVar[float] = -0.95

    def __init__(self) -> None:
        self._connected = [False] * self.MAX_INPUT_DEVICE_COUNT
        self._connected[self.KEYBOARD_INDEX] = True
        self._connected[self.MOUSE_INDEX] = True
        self._inputs: defaultdict[int, dict[int, InputInstance]] = defaultdict(dict)
        self._axes: defaultdict[int, dict[int, InputInstance]] = defaultdict(dict)
        self._input_bindings: defaultdict[int, dict[int, _Binding]] = defaultdict(dict)
        self._axis_bindings: defaultdict[int, dict[int, _Binding]] = defaultdict(dict)
        self.window_handler: Any = None

    # ~~~ Device handling ~~~

    def initialize(self, window_handler: Any) -> bool:
        """Attach to a window handler; returns False when none is given."""
        self.window_handler = window_handler
        return window_handler is not None

    def update(self, delta_time: float) -> None:
        """Run the bindings whose cached action has changed."""
        self.execute_input_bindings()

    def is_key_down(self, key: Key) -> bool:
        """Whether the key's latest event is a press or a repeat."""
        instance = self.tracked_input(self.KEYBOARD_INDEX, key)
        return instance.curr_event.action >= InputAction.PRESSED

    def is_gamepad_button_down(self, gamepad_id: GamepadId, button: GamepadButton) -> bool:
        """Whether a connected gamepad's button is currently pressed."""
        if not self.is_gamepad_connected(gamepad_id):
            return False
        instance = self.tracked_input(int(gamepad_id), button)
        return instance.curr_event.action == InputAction.PRESSED

    def is_gamepad_connected(self, gamepad_id: GamepadId) -> bool:
        return self._connected[self._device_index(gamepad_id)]

    def _device_index(self, device_id: int) -> int:
        if not 0 <= device_id < self.MAX_INPUT_DEVICE_COUNT:
            raise ValueError(f"input device id out of range: {device_id}")
        return int(device_id)

    def device_connected(self, device_id: int, device: InputDevice) -> None:
        self._connected[self._device_index(device_id)] = True
        self.on_device_connected(device_id, device)

    def device_disconnected(self, device_id: int, device: InputDevice) -> None:
        self._connected[self._device_index(device_id)] = False
        self.on_device_disconnected(device_id, device)

    def on_device_connected(self, device_id: int, device: InputDevice) -> None:
        """Hook called after a device connects."""

    def on_device_disconnected(self, device_id: int, device: InputDevice) -> None:
        """Hook called after a device disconnects."""

    # ~~~ Bindings ~~~

    def bind_key(self, key: Key, action: InputAction, callback: InputCallback) -> None:
        if key != Key.MAX and action != InputAction.UNKNOWN:
            self._input_bindings[self.KEYBOARD_INDEX][int(key)] = _Binding(callback, int(action))

    def bind_mouse_button(self, button: MouseButton, action: InputAction, callback: InputCallback) -> None:
        if button != MouseButton.MAX and action != InputAction.UNKNOWN:
            self._input_bindings[self.MOUSE_INDEX][int(button)] = _Binding(callback, int(action))

    def bind_mouse_scroll_wheel(self, axis: MouseScrollAxis, action: AxisAction, callback: AxisCallback) -> None:
        if axis != MouseScrollAxis.MAX and action != AxisAction.UNKNOWN:
            self._axis_bindings[self.MOUSE_INDEX][int(axis)] = _Binding(callback, int(action))

    def bind_gamepad_button(
        self, gamepad_id: GamepadId, button: GamepadButton, action: InputAction, callback: InputCallback
    ) -> None:
        if gamepad_id != GamepadId.MAX and button != GamepadButton.MAX and action != InputAction.UNKNOWN:
            self._input_bindings[int(gamepad_id)][int(button)] = _Binding(callback, int(action))

    def bind_gamepad_axis(
        self, gamepad_id: GamepadId, axis: GamepadAxis, action: AxisAction, callback: AxisCallback
    ) -> None:
        if gamepad_id != GamepadId.MAX and axis != GamepadAxis.MAX and action != AxisAction.UNKNOWN:
            self._axis_bindings[int(gamepad_id)][int(axis)] = _Binding(callback, int(action))

    def clear_key_binding(self, key: Key) -> None:
        self._input_bindings[self.KEYBOARD_INDEX].pop(int(key), None)

    def clear_mouse_button_binding(self, button: MouseButton) -> None:
        self._input_bindings[self.MOUSE_INDEX].pop(int(button), None)

    def clear_mouse_scroll_axis_binding(self, axis: MouseScrollAxis) -> None:
        self._axis_bindings[self.MOUSE_INDEX].pop(int(axis), None)

    def clear_gamepad_button_binding(self, gamepad_id: GamepadId, button: GamepadButton) -> None:
        if gamepad_id != GamepadId.MAX:
            self._input_bindings[int(gamepad_id)].pop(int(button), None)

    def clear_gamepad_axis_binding(self, gamepad_id: GamepadId, axis: GamepadAxis) -> None:
        if gamepad_id != GamepadId.MAX:
            self._axis_bindings[int(gamepad_id)].pop(int(axis), None)

    # ~~~ Raw input ~~~

    def process_keyboard_input(self, event: InputEvent) -> None:
        if event.button < Key.MAX:
            self._process_button(self.KEYBOARD_INDEX, event)

    def process_mouse_button_input(self, event: InputEvent) -> None:
        if event.button < MouseButton.MAX:
            self._process_button(self.MOUSE_INDEX, event)

    def process_mouse_scroll_axis_input(self, event: InputEvent) -> None:
        if event.button < MouseScrollAxis.MAX:
            self._process_axis(self.MOUSE_INDEX, event)

    def process_gamepad_button_input(self, gamepad_id: GamepadId, event: InputEvent) -> None:
        if event.button < GamepadButton.MAX and gamepad_id != GamepadId.MAX:
            self._process_button(int(gamepad_id), event)

    def process_gamepad_axis_input(self, gamepad_id: GamepadId, event: InputEvent) -> None:
        if event.button < GamepadAxis.MAX and gamepad_id != GamepadId.MAX:
            self._process_axis(int(gamepad_id), event)

    def execute_input_bindings(self) -> None:
        """Call every binding whose action matches an unconsumed cached action."""
        for device in range(self.MAX_INPUT_DEVICE_COUNT):
            for button, binding in list(self._input_bindings[device].items()):
                instance = self._inputs[device].setdefault(button, InputInstance())
                if (
                    binding.action != -1
                    and not instance.is_consumed
                    and int(instance.cached_action) == binding.action
                ):
                    binding.callback(button, binding.action)
                    instance.is_consumed = True

            for axis, binding in list(self._axis_bindings[device].items()):
                instance = self._axes[device].setdefault(axis, InputInstance())
                if (
                    binding.action != -1
                    and not instance.is_consumed
                    and int(instance.cached_axis_action) == binding.action
                ):
                    binding.callback(axis, binding.action, instance.curr_event.value)
                    instance.is_consumed = True

    def tracked_input(self, device_id: int, button: int) -> InputInstance:
        """State of a button; a fresh default state if it was never seen."""
        return self._inputs.get(device_id, {}).get(int(button)) or InputInstance()

    def tracked_axis(self, device_id: int, axis: int) -> InputInstance:
        """State of an axis; a fresh default state if it was never seen."""
        return self._axes.get(device_id, {}).get(int(axis)) or InputInstance()

    def _process_button(self, device_id: int, event: InputEvent) -> None:
        if event.button < 0:
            return
        instance = self._inputs[device_id].setdefault(event.button, InputInstance())

        if instance.curr_event.action != event.action:
            instance.is_consumed = False
            instance.prev_event = instance.curr_event
            instance.curr_event = event

        prev_action = instance.prev_event.action
        curr_action = instance.curr_event.action
        if prev_action == InputAction.PRESSED and curr_action == InputAction.RELEASED:
            elapsed = (instance.curr_event.timestamp - instance.prev_event.timestamp) & _U32
            if elapsed <= self.CLICK_TIME:
                instance.cached_action = InputAction.CLICKED
            else:
                instance.cached_action = InputAction.RELEASED
        else:
            instance.cached_action = _as_action(curr_action)

    def _process_axis(self, device_id: int, event: InputEvent) -> None:
        if event.button < 0:
            return
        instance = self._axes[device_id].setdefault(event.button, InputInstance())

        if self._is_trigger_axis(event.button):
            alive = event.value >= self.DEADZONE_TRIGGER
        else:
            deadzone = self.DEADZONE_THUMBSTICK
            alive = event.value >= deadzone or event.value <= -deadzone

        if alive:
            instance.is_consumed = False
            instance.prev_event = instance.curr_event
            instance.curr_event = event
            instance.cached_axis_action = AxisAction.TILTED
        else:
            instance.cached_axis_action = AxisAction.UNKNOWN

    @staticmethod
    def _is_trigger_axis(axis: int) -> bool:
        return axis in (GamepadAxis.LEFT_TRIGGER, GamepadAxis.RIGHT_TRIGGER)