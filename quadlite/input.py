"""Mouse, keyboard and touch state, fed by window events and read by the game."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Any, Hashable

from quadlite.math import Vec2


class MouseButton(enum.Enum):
    """Mouse buttons."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


class TouchPhase(enum.Enum):
    """Life cycle stage of a touch."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass
class Touch:
    """One finger on the screen."""

    id: int
    phase: TouchPhase
    position: Vec2


class _EventKind(enum.Enum):
    MOUSE_MOTION = "mouse_motion_event"
    MOUSE_WHEEL = "mouse_wheel_event"
    MOUSE_BUTTON_DOWN = "mouse_button_down_event"
    MOUSE_BUTTON_UP = "mouse_button_up_event"
    CHAR = "char_event"
    KEY_DOWN = "key_down_event"
    KEY_UP = "key_up_event"
    TOUCH = "touch_event"


@dataclass(frozen=True)
class InputEvent:
    """A recorded input event, replayable on any handler with matching methods."""

    kind: _EventKind
    args: tuple[Any, ...]

    @property
    def handler_method(self) -> str:
        """Name of the handler method this event is delivered to."""
        return self.kind.value

    def repeat(self, handler: Any) -> None:
        """Deliver this event to ``handler``."""
        getattr(handler, self.kind.value)(*self.args)


@dataclass
class InputState:
    """Current input state of a window, updated by events and reset each frame."""

    screen_width: float = 800.0
    screen_height: float = 600.0
    simulate_mouse_with_touch: bool = True
    cursor_grabbed: bool = False
    keys_down: set[Hashable] = field(default_factory=set)
    keys_pressed: dict[Hashable, None] = field(default_factory=dict)
    keys_released: set[Hashable] = field(default_factory=set)
    mouse_down: set[MouseButton] = field(default_factory=set)
    mouse_pressed: set[MouseButton] = field(default_factory=set)
    mouse_released: set[MouseButton] = field(default_factory=set)
    touch_map: dict[int, Touch] = field(default_factory=dict)
    chars_pressed_queue: list[str] = field(default_factory=list)
    position: Vec2 = Vec2(0.0, 0.0)
    wheel: Vec2 = Vec2(0.0, 0.0)
    _subscribers: list[list[InputEvent]] = field(default_factory=list, repr=False)

    def _broadcast(self, kind: _EventKind, *args: Any) -> None:
        event = InputEvent(kind, args)
        for queue in self._subscribers:
            queue.append(event)

    # Event side.

    def resize_event(self, width: float, height: float) -> None:
        self.screen_width = width
        self.screen_height = height

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative motion; only moves the cursor while it is grabbed."""
        if self.cursor_grabbed:
            self.position = self.position + Vec2(x, y)
            self._broadcast(_EventKind.MOUSE_MOTION, self.position.x, self.position.y)

    def mouse_motion_event(self, x: float, y: float) -> None:
        if not self.cursor_grabbed:
            self.position = Vec2(x, y)
            self._broadcast(_EventKind.MOUSE_MOTION, x, y)

    def mouse_wheel_event(self, x: float, y: float) -> None:
        self.wheel = Vec2(x, y)
        self._broadcast(_EventKind.MOUSE_WHEEL, x, y)

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        self.mouse_down.add(button)
        self.mouse_pressed.add(button)
        if not self.cursor_grabbed:
            self.position = Vec2(x, y)
            self._broadcast(_EventKind.MOUSE_BUTTON_DOWN, button, x, y)

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        self.mouse_down.discard(button)
        self.mouse_released.add(button)
        if not self.cursor_grabbed:
            self.position = Vec2(x, y)
            self._broadcast(_EventKind.MOUSE_BUTTON_UP, button, x, y)

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        self.touch_map[touch_id] = Touch(touch_id, phase, Vec2(x, y))
        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)
        self._broadcast(_EventKind.TOUCH, phase, touch_id, x, y)

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        self.chars_pressed_queue.append(character)
        self._broadcast(_EventKind.CHAR, character, modifiers, repeat)

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        self.keys_down.add(keycode)
        if not repeat:
            self.keys_pressed.pop(keycode, None)
            self.keys_pressed[keycode] = None
        self._broadcast(_EventKind.KEY_DOWN, keycode, modifiers, repeat)

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        self.keys_down.discard(keycode)
        self.keys_released.add(keycode)
        self._broadcast(_EventKind.KEY_UP, keycode, modifiers)

    def end_frame(self) -> None:
        """Forget per-frame state and age touches."""
        self.wheel = Vec2(0.0, 0.0)
        self.keys_pressed.clear()
        self.keys_released.clear()
        self.mouse_pressed.clear()
        self.mouse_released.clear()
        self.touch_map = {
            touch_id: touch
            for touch_id, touch in self.touch_map.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }
        for touch in self.touch_map.values():
            if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED):
                touch.phase = TouchPhase.STATIONARY

    # Query side.

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self.cursor_grabbed = grab

    def _to_local(self, pixel_pos: Vec2) -> Vec2:
        return Vec2(
            pixel_pos.x / self.screen_width, pixel_pos.y / self.screen_height
        ) * 2.0 - Vec2(1.0, 1.0)

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in pixels."""
        return (self.position.x, self.position.y)

    def mouse_position_local(self) -> Vec2:
        """Mouse position in the range [-1, 1]."""
        return self._to_local(self.position)

    def touches(self) -> list[Touch]:
        """Copies of the current touches, positions in pixels."""
        return [dataclasses.replace(touch) for touch in self.touch_map.values()]

    def touches_local(self) -> list[Touch]:
        """Copies of the current touches, positions in the range [-1, 1]."""
        return [
            dataclasses.replace(touch, position=self._to_local(touch.position))
            for touch in self.touch_map.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        return (self.wheel.x, self.wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """True if the key went down this frame."""
        return keycode in self.keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """True while the key is held."""
        return keycode in self.keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """True if the key went up this frame."""
        return keycode in self.keys_released

    def get_char_pressed(self) -> str | None:
        """Take the most recent character off the input queue, or None."""
        return self.chars_pressed_queue.pop() if self.chars_pressed_queue else None

    def get_last_key_pressed(self) -> Hashable | None:
        """The most recently pressed key this frame, or None."""
        return next(reversed(self.keys_pressed), None)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self.mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self.mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self.mouse_released

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber and return its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def repeat_all_input(self, handler: Any, subscriber: int) -> None:
        """Replay on ``handler`` every event recorded for ``subscriber`` since the last call."""
        queue = self._subscribers[subscriber]
        for event in queue:
            event.repeat(handler)
        queue.clear()