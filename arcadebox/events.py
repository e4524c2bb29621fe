"""Colours, library kinds and input events shared by games and displays."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from arcadebox.vector import Vector


@dataclass
class Color:
    """An RGBA colour with 0-255 channels."""

    r: int
    g: int
    b: int
    a: int = 255


class LibraryType(IntEnum):
    """Kind of a loadable library."""

    UNKNOWN = 0
    GRAPHIC = 1
    GAME = 2


class EventType(IntEnum):
    """General event category."""

    NONE = 0
    MOUSE = 1
    KEYBOARD = 2
    WINDOW = 3


class MouseEventType(IntEnum):
    """Kind of mouse event."""

    NONE = 0
    CLICK_RIGHT = 1
    CLICK_LEFT = 2
    UNCLICK_RIGHT = 3
    UNCLICK_LEFT = 4
    MOVE = 5
    CLICK_WHEEL = 6
    UNCLICK_WHEEL = 7
    WHEEL_UP = 8
    WHEEL_DOWN = 9


class KeyEventType(IntEnum):
    """Kind of keyboard event."""

    NONE = 0
    PRESS = 1
    RELEASE = 2


class KeyCode(IntEnum):
    """Key identifiers; letters are consecutive from A to Z."""

    NONE = 0
    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9  # noqa: E741
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15  # noqa: E741
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26
    NUM_0 = 27
    NUM_1 = 28
    NUM_2 = 29
    NUM_3 = 30
    NUM_4 = 31
    NUM_5 = 32
    NUM_6 = 33
    NUM_7 = 34
    NUM_8 = 35
    NUM_9 = 36
    SPACE = 37
    ENTER = 38
    ESCAPE = 39
    BACKSPACE = 40
    TAB = 41
    SHIFT = 42
    CTRL = 43
    ALT = 44
    CAPS_LOCK = 45
    UP = 46
    DOWN = 47
    LEFT = 48
    RIGHT = 49
    F1 = 50
    F2 = 51
    F3 = 52
    F4 = 53
    F5 = 54
    F6 = 55
    F7 = 56
    F8 = 57
    F9 = 58
    F10 = 59
    F11 = 60
    F12 = 61


class WindowEventType(IntEnum):
    """Kind of window event."""

    NONE = 0
    RESIZE = 1
    CLOSE = 2


@dataclass
class MouseEvent:
    """A mouse action at a position."""

    position: Vector
    event_type: MouseEventType
    delta_wheel: float = 0.0


@dataclass
class KeyboardEvent:
    """A key press or release."""

    event_type: KeyEventType
    key_code: KeyCode


@dataclass
class WindowEvent:
    """A window resize or close."""

    event_type: WindowEventType
    size: Vector = field(default_factory=Vector)


EventData = Union[MouseEvent, KeyboardEvent, WindowEvent, None]


@dataclass
class Event:
    """An input event: a category and its payload."""

    type: EventType = EventType.NONE
    data: EventData = None