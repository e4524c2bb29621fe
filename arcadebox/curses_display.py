"""A terminal display built on curses."""

from __future__ import annotations

import curses
import math
import string
import sys
from typing import Any, Optional

from arcadebox.curses_models import CursesRect, CursesSprite, CursesText
from arcadebox.events import (
    Color,
    Event,
    EventType,
    KeyboardEvent,
    KeyCode,
    KeyEventType,
    MouseEvent,
    MouseEventType,
)
from arcadebox.interfaces import Display, Drawable, Music
from arcadebox.vector import Vector

CELL_PIXELS = 16
FIRST_FREE_PAIR = 8
_BACKGROUND = Color(0, 0, 0, 255)
_ESCAPE = 27
_NO_INPUT = -1


def _build_key_table() -> dict[int, KeyCode]:
    table: dict[int, KeyCode] = {}
    for offset, letter in enumerate(string.ascii_lowercase):
        code = KeyCode(KeyCode.A + offset)
        table[ord(letter)] = code
        table[ord(letter.upper())] = code
    for digit in range(10):
        table[ord(str(digit))] = KeyCode(KeyCode.NUM_0 + digit)
    table.update(
        {
            ord(" "): KeyCode.SPACE,
            ord("\n"): KeyCode.ENTER,
            curses.KEY_ENTER: KeyCode.ENTER,
            _ESCAPE: KeyCode.ESCAPE,
            curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
            ord("\t"): KeyCode.TAB,
            curses.KEY_UP: KeyCode.UP,
            curses.KEY_DOWN: KeyCode.DOWN,
            curses.KEY_LEFT: KeyCode.LEFT,
            curses.KEY_RIGHT: KeyCode.RIGHT,
        }
    )
    for number in range(1, 13):
        table[curses.KEY_F0 + number] = KeyCode(KeyCode.F1 + number - 1)
    return table


_KEYS = _build_key_table()

_MOUSE_BUTTONS = [
    (mask, kind)
    for mask, kind in (
        (getattr(curses, "BUTTON1_PRESSED", 0), MouseEventType.CLICK_LEFT),
        (getattr(curses, "BUTTON1_RELEASED", 0), MouseEventType.UNCLICK_LEFT),
        (getattr(curses, "BUTTON3_PRESSED", 0), MouseEventType.CLICK_RIGHT),
        (getattr(curses, "BUTTON3_RELEASED", 0), MouseEventType.UNCLICK_RIGHT),
        (getattr(curses, "BUTTON2_PRESSED", 0), MouseEventType.CLICK_WHEEL),
        (getattr(curses, "BUTTON2_RELEASED", 0), MouseEventType.UNCLICK_WHEEL),
        (getattr(curses, "BUTTON4_PRESSED", 0), MouseEventType.WHEEL_UP),
        (getattr(curses, "BUTTON5_PRESSED", 0), MouseEventType.WHEEL_DOWN),
    )
    if mask
]

_BASE_PAIRS = [
    (1, curses.COLOR_WHITE),
    (2, curses.COLOR_RED),
    (3, curses.COLOR_GREEN),
    (4, curses.COLOR_BLUE),
    (5, curses.COLOR_YELLOW),
    (6, curses.COLOR_MAGENTA),
    (7, curses.COLOR_CYAN),
]


def key_from_char(ch: int) -> KeyCode:
    """Map a curses input code to a key code; unknown codes give KeyCode.NONE."""
    return _KEYS.get(ch, KeyCode.NONE)


def mouse_event_type(bstate: int) -> MouseEventType:
    """Map a curses button state to the first matching mouse event kind."""
    for mask, kind in _MOUSE_BUTTONS:
        if bstate & mask:
            return kind
    return MouseEventType.NONE


def terminal_color(color: Color) -> int:
    """Map an RGB colour to the nearest of the eight basic terminal colours."""
    r, g, b = color.r, color.g, color.b
    if r > 200 and g < 100 and b < 100:
        return curses.COLOR_RED
    if r < 100 and g > 200 and b < 100:
        return curses.COLOR_GREEN
    if r < 100 and g < 100 and b > 200:
        return curses.COLOR_BLUE
    if r > 200 and g > 200 and b < 100:
        return curses.COLOR_YELLOW
    if r > 200 and g < 100 and b > 200:
        return curses.COLOR_MAGENTA
    if r < 100 and g > 200 and b > 200:
        return curses.COLOR_CYAN
    if r > 200 and g > 200 and b > 200:
        return curses.COLOR_WHITE
    return curses.COLOR_BLACK


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class _CursesTerminal:
    """Process-wide curses calls used by the display."""

    def init_pair(self, number: int, fg: int, bg: int) -> None:
        curses.init_pair(number, fg, bg)

    def color_pair(self, number: int) -> int:
        return curses.color_pair(number)

    def getmouse(self) -> tuple[int, int, int, int, int]:
        return curses.getmouse()

    def resize(self, lines: int, cols: int) -> None:
        curses.resizeterm(lines, cols)

    def end(self) -> None:
        curses.endwin()


def _open_screen() -> Any:
    if not sys.stdout.isatty():
        raise RuntimeError("curses initialization failed: not a terminal")
    screen = curses.initscr()
    curses.cbreak()
    curses.noecho()
    screen.keypad(True)
    screen.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    if not curses.has_colors():
        curses.endwin()
        raise RuntimeError("terminal does not support colour")
    curses.start_color()
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    return screen


class CursesDisplay(Display):
    """Draws objects as characters in a terminal and reads keys and mouse clicks.

    Without a screen, the real terminal is set up; a screen and terminal may be
    given to drive any curses-like window instead.
    """

    def __init__(self, screen: Any = None, terminal: Any = None) -> None:
        self.title = "Arcade"
        self._terminal = terminal if terminal is not None else _CursesTerminal()
        self._screen = screen if screen is not None else _open_screen()
        self._pairs: dict[tuple[int, int], int] = {}
        self._next_pair = FIRST_FREE_PAIR
        for number, fg in _BASE_PAIRS:
            self._terminal.init_pair(number, fg, curses.COLOR_BLACK)
        self._open = True

    def __enter__(self) -> CursesDisplay:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close_window()

    def set_title(self, title: str) -> None:
        """Remember the title; a terminal has nowhere to show it."""
        self.title = title

    def set_size(self, size: Vector) -> None:
        """Resize the terminal to size.y lines by size.x columns."""
        if self._open:
            self._terminal.resize(int(size.y), int(size.x))

    def close_window(self) -> None:
        """Restore the terminal; later calls do nothing."""
        if self._open:
            self._terminal.end()
            self._open = False

    def draw(self, item: Drawable) -> None:
        """Draw a terminal rectangle, sprite or text; other objects are ignored."""
        if not self._open:
            return
        if isinstance(item, CursesRect):
            self._draw_rect(item)
        elif isinstance(item, CursesSprite):
            self._draw_sprite(item)
        elif isinstance(item, CursesText):
            self._draw_text(item)

    def play_music(self, music: Music) -> None:
        """Terminals play no music."""

    def stop_music(self, music: Music) -> None:
        """Terminals play no music."""

    def restart_music(self, music: Music) -> None:
        """Terminals play no music."""

    def clear(self) -> None:
        """Blank the screen."""
        if self._open:
            self._screen.erase()

    def display(self) -> None:
        """Flush what was drawn to the terminal."""
        if self._open:
            self._screen.refresh()

    def poll_event(self) -> Optional[Event]:
        """Return the next key or mouse event, or None when no input waits."""
        if not self._open:
            return None
        ch = self._screen.getch()
        if ch == _NO_INPUT:
            return None
        if ch == curses.KEY_MOUSE:
            return self._mouse_event()
        return Event(
            EventType.KEYBOARD, KeyboardEvent(KeyEventType.PRESS, key_from_char(ch))
        )

    def is_open(self) -> bool:
        """Tell whether the terminal is still in use."""
        return self._open

    def _mouse_event(self) -> Optional[Event]:
        try:
            _, x, y, _, bstate = self._terminal.getmouse()
        except curses.error:
            return None
        kind = mouse_event_type(bstate)
        delta = {MouseEventType.WHEEL_UP: 1.0, MouseEventType.WHEEL_DOWN: -1.0}.get(
            kind, 0.0
        )
        return Event(EventType.MOUSE, MouseEvent(Vector(x, y), kind, delta))

    def _color_pair(self, fg: Color, bg: Color) -> int:
        key = (terminal_color(fg), terminal_color(bg))
        number = self._pairs.get(key)
        if number is None:
            number = self._next_pair
            self._next_pair += 1
            self._terminal.init_pair(number, *key)
            self._pairs[key] = number
        return number

    def _put(self, y: int, x: int, ch: str) -> None:
        lines, cols = self._screen.getmaxyx()
        if 0 <= y < lines and 0 <= x < cols:
            try:
                self._screen.addch(y, x, ch)
            except curses.error:
                pass

    def _with_color(self, color: Color):
        return _ColorScope(self._screen, self._terminal.color_pair(self._color_pair(color, _BACKGROUND)))

    def _draw_rect(self, rect: CursesRect) -> None:
        if rect.thickness < 0:
            return
        left = int(rect.pos.x / CELL_PIXELS)
        top = int(rect.pos.y / CELL_PIXELS)
        width = max(1, int(rect.size.x / CELL_PIXELS))
        height = max(1, int(rect.size.y / CELL_PIXELS))
        right = left + width - 1
        bottom = top + height - 1
        with self._with_color(rect.color):
            for x in range(left, left + width):
                self._put(top, x, "-")
                self._put(bottom, x, "-")
            for y in range(top, top + height):
                self._put(y, left, "|")
                self._put(y, right, "|")
            for y, x in ((top, left), (top, right), (bottom, left), (bottom, right)):
                self._put(y, x, "+")
            if rect.thickness > 1:
                for y in range(top + 1, bottom):
                    for x in range(left + 1, right):
                        self._put(y, x, " ")

    def _draw_sprite(self, sprite: CursesSprite) -> None:
        x = _round_half_away(sprite.pos.x / CELL_PIXELS)
        y = _round_half_away(sprite.pos.y / CELL_PIXELS)
        with self._with_color(sprite.color):
            self._put(y, x, sprite.character)

    def _draw_text(self, text: CursesText) -> None:
        x = int(text.pos.x / CELL_PIXELS)
        y = int(text.pos.y / CELL_PIXELS)
        with self._with_color(text.color):
            lines, _ = self._screen.getmaxyx()
            if 0 <= y < lines:
                try:
                    self._screen.addstr(y, x, text.text)
                except curses.error:
                    pass


class _ColorScope:
    """Turns a colour attribute on for the duration of a with block."""

    def __init__(self, screen: Any, attr: int) -> None:
        self._screen = screen
        self._attr = attr

    def __enter__(self) -> None:
        self._screen.attron(self._attr)

    def __exit__(self, *exc_info: object) -> None:
        self._screen.attroff(self._attr)