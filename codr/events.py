"""Keyboard and mouse events and the interface actions they map to."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EventResult(enum.Enum):
    """Action requested by an input event."""

    SUBMIT = enum.auto()
    CANCEL = enum.auto()
    INTERRUPT_AGENT = enum.auto()
    EXIT = enum.auto()
    SWITCH_ROLE = enum.auto()
    APPROVE_ACTION = enum.auto()
    REJECT_ACTION = enum.auto()
    NO_OP = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    MOVE_TO_START = enum.auto()
    MOVE_TO_END = enum.auto()
    HISTORY_UP = enum.auto()
    HISTORY_DOWN = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_DOWN = enum.auto()
    SCROLL_TO_TOP = enum.auto()
    SCROLL_TO_BOTTOM = enum.auto()
    TOGGLE_OUTPUT_COLLAPSE = enum.auto()


@dataclass(frozen=True)
class Input:
    """A typed character to be inserted into the input line."""

    char: str


class KeyCode(enum.Enum):
    """Non-character keys. Printable characters are given as one-character strings."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    ESC = enum.auto()
    NULL = enum.auto()
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()


class KeyModifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


class KeyEventKind(enum.Enum):
    PRESS = enum.auto()
    REPEAT = enum.auto()
    RELEASE = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press, repeat or release."""

    code: KeyCode | str
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"a character key needs exactly one character: {self.code!r}")


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


class MouseEventKind(enum.Enum):
    DOWN = enum.auto()
    UP = enum.auto()
    DRAG = enum.auto()
    MOVED = enum.auto()
    SCROLL_DOWN = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_LEFT = enum.auto()
    SCROLL_RIGHT = enum.auto()


_BUTTON_KINDS = frozenset({MouseEventKind.DOWN, MouseEventKind.UP, MouseEventKind.DRAG})


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a terminal position."""

    kind: MouseEventKind
    button: MouseButton | None = None
    column: int = 0
    row: int = 0
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.kind in _BUTTON_KINDS and self.button is None:
            raise ValueError(f"{self.kind.name} events need a mouse button")


_CONTROL_CHARS = {
    "s": EventResult.NO_OP,
    "c": EventResult.INTERRUPT_AGENT,
    "d": EventResult.EXIT,
    "l": EventResult.NO_OP,
    "u": EventResult.CANCEL,
}

_NAMED_KEYS = {
    KeyCode.ENTER: EventResult.SUBMIT,
    KeyCode.ESC: EventResult.CANCEL,
    KeyCode.TAB: EventResult.SWITCH_ROLE,
    KeyCode.BACK_TAB: EventResult.SWITCH_ROLE,
    KeyCode.UP: EventResult.HISTORY_UP,
    KeyCode.DOWN: EventResult.HISTORY_DOWN,
    KeyCode.LEFT: EventResult.MOVE_LEFT,
    KeyCode.RIGHT: EventResult.MOVE_RIGHT,
    KeyCode.HOME: EventResult.MOVE_TO_START,
    KeyCode.END: EventResult.MOVE_TO_END,
    KeyCode.PAGE_UP: EventResult.SCROLL_UP,
    KeyCode.PAGE_DOWN: EventResult.SCROLL_DOWN,
    KeyCode.BACKSPACE: EventResult.BACKSPACE,
    KeyCode.DELETE: EventResult.DELETE,
}


def _is_press(event: KeyEvent) -> bool:
    return event.kind is KeyEventKind.PRESS


def _has_control(event: KeyEvent) -> bool:
    return KeyModifiers.CONTROL in event.modifiers


def handle_key_event(event: KeyEvent) -> EventResult | Input:
    """Map a key event to the action it requests."""
    if not _is_press(event):
        return EventResult.NO_OP
    code = event.code
    if isinstance(code, str):
        if _has_control(event) and code in _CONTROL_CHARS:
            return _CONTROL_CHARS[code]
        if code == "o":
            return EventResult.TOGGLE_OUTPUT_COLLAPSE
        return Input(code)
    return _NAMED_KEYS.get(code, EventResult.NO_OP)


def handle_mouse_event(event: MouseEvent) -> EventResult:
    """Map a mouse event to the action it requests."""
    if event.kind is MouseEventKind.SCROLL_UP:
        return EventResult.SCROLL_UP
    if event.kind is MouseEventKind.SCROLL_DOWN:
        return EventResult.SCROLL_DOWN
    return EventResult.NO_OP


def should_submit(event: KeyEvent) -> bool:
    return event.code is KeyCode.ENTER and _is_press(event)


def should_cancel(event: KeyEvent) -> bool:
    return event.code is KeyCode.ESC and _is_press(event)


def should_exit(event: KeyEvent) -> bool:
    """Only Ctrl+D exits directly; Ctrl+C goes through agent interruption."""
    return _is_press(event) and event.code == "d" and _has_control(event)


def should_switch_role(event: KeyEvent) -> bool:
    return _is_press(event) and event.code in (KeyCode.TAB, KeyCode.BACK_TAB)