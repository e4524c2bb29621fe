import curses
import io
import sys

import pytest

from arcadebox.curses_display import (
    CursesDisplay,
    key_from_char,
    mouse_event_type,
    terminal_color,
)
from arcadebox.curses_models import CursesMusic, CursesRect, CursesSprite, CursesText
from arcadebox.events import (
    Color,
    EventType,
    KeyCode,
    KeyEventType,
    MouseEventType,
)
from arcadebox.vector import Vector


class FakeScreen:
    def __init__(self, lines=30, cols=80, keys=()):
        self.lines = lines
        self.cols = cols
        self.cells = {}
        self.strings = []
        self.keys = list(keys)
        self.attrs_on = []
        self.attrs_off = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return (self.lines, self.cols)

    def addch(self, y, x, ch):
        self.cells[(y, x)] = ch

    def addstr(self, y, x, text):
        self.strings.append((y, x, text))

    def attron(self, attr):
        self.attrs_on.append(attr)

    def attroff(self, attr):
        self.attrs_off.append(attr)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def erase(self):
        self.erased += 1

    def refresh(self):
        self.refreshed += 1


class FakeTerminal:
    def __init__(self, mouse=None):
        self.pairs = {}
        self.mouse = mouse
        self.resized = []
        self.ended = 0

    def init_pair(self, number, fg, bg):
        self.pairs[number] = (fg, bg)

    def color_pair(self, number):
        return number

    def getmouse(self):
        if self.mouse is None:
            raise curses.error("no mouse")
        return self.mouse

    def resize(self, lines, cols):
        self.resized.append((lines, cols))

    def end(self):
        self.ended += 1


def render(*items, lines=30, cols=80):
    """Draw items on a fresh display and return the screen's cells and strings."""
    screen = FakeScreen(lines=lines, cols=cols)
    display = CursesDisplay(screen=screen, terminal=FakeTerminal())
    for item in items:
        display.draw(item)
    return dict(screen.cells), list(screen.strings)


def render_pairs(*items):
    """Draw items on a fresh display and return colour pairs and attributes used."""
    screen = FakeScreen()
    terminal = FakeTerminal()
    display = CursesDisplay(screen=screen, terminal=terminal)
    for item in items:
        display.draw(item)
    return dict(terminal.pairs), list(screen.attrs_on), list(screen.attrs_off)


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def display(screen, terminal):
    return CursesDisplay(screen=screen, terminal=terminal)


@pytest.mark.parametrize(
    "ch, expected",
    [
        (ord("a"), KeyCode.A),
        (ord("Z"), KeyCode.Z),
        (ord("5"), KeyCode.NUM_5),
        (ord(" "), KeyCode.SPACE),
        (ord("\n"), KeyCode.ENTER),
        (curses.KEY_ENTER, KeyCode.ENTER),
        (27, KeyCode.ESCAPE),
        (curses.KEY_BACKSPACE, KeyCode.BACKSPACE),
        (ord("\t"), KeyCode.TAB),
        (curses.KEY_UP, KeyCode.UP),
        (curses.KEY_RIGHT, KeyCode.RIGHT),
        (curses.KEY_F1, KeyCode.F1),
        (curses.KEY_F12, KeyCode.F12),
        (ord("!"), KeyCode.NONE),
    ],
)
def test_key_from_char(ch, expected):
    assert key_from_char(ch) == expected


def test_mouse_event_type_single_buttons():
    assert mouse_event_type(curses.BUTTON1_PRESSED) == MouseEventType.CLICK_LEFT
    assert mouse_event_type(curses.BUTTON1_RELEASED) == MouseEventType.UNCLICK_LEFT
    assert mouse_event_type(curses.BUTTON3_PRESSED) == MouseEventType.CLICK_RIGHT
    assert mouse_event_type(curses.BUTTON2_RELEASED) == MouseEventType.UNCLICK_WHEEL
    assert mouse_event_type(curses.BUTTON4_PRESSED) == MouseEventType.WHEEL_UP
    assert mouse_event_type(0) == MouseEventType.NONE


def test_mouse_event_type_priority_left_first():
    state = curses.BUTTON1_PRESSED | curses.BUTTON3_PRESSED
    assert mouse_event_type(state) == MouseEventType.CLICK_LEFT


@pytest.mark.parametrize(
    "color, expected",
    [
        (Color(255, 0, 0), curses.COLOR_RED),
        (Color(0, 255, 0), curses.COLOR_GREEN),
        (Color(0, 0, 255), curses.COLOR_BLUE),
        (Color(255, 255, 0), curses.COLOR_YELLOW),
        (Color(255, 0, 255), curses.COLOR_MAGENTA),
        (Color(0, 255, 255), curses.COLOR_CYAN),
        (Color(255, 255, 255), curses.COLOR_WHITE),
        (Color(0, 0, 0), curses.COLOR_BLACK),
        (Color(255, 165, 0), curses.COLOR_BLACK),
    ],
)
def test_terminal_color(color, expected):
    assert terminal_color(color) == expected


def test_base_pairs_initialised(display, terminal):
    assert sorted(terminal.pairs) == [1, 2, 3, 4, 5, 6, 7]
    assert terminal.pairs[2] == (curses.COLOR_RED, curses.COLOR_BLACK)
    assert display.is_open() is True


def test_not_a_terminal_raises(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    with pytest.raises(RuntimeError):
        CursesDisplay()


def test_draw_text_scaled_position():
    _, strings = render(CursesText(text="hello", pos=Vector(32, 48)))
    assert strings == [(3, 2, "hello")]


def test_draw_text_off_screen_row_skipped():
    _, strings = render(CursesText(text="far", pos=Vector(0, 16 * 30)), lines=30)
    assert strings == []


def test_color_pairs_allocated_and_reused():
    pairs, attrs_on, attrs_off = render_pairs(
        CursesText(text="a"),
        CursesText(text="b"),
        CursesText(text="c", color=Color(255, 0, 0)),
    )
    assert pairs[8] == (curses.COLOR_WHITE, curses.COLOR_BLACK)
    assert pairs[9] == (curses.COLOR_RED, curses.COLOR_BLACK)
    assert 10 not in pairs
    assert attrs_on == [8, 8, 9]
    assert attrs_off == attrs_on


def test_draw_small_rect_is_a_corner():
    cells, _ = render(CursesRect(size=Vector(16, 16), pos=Vector(0, 0)))
    assert cells == {(0, 0): "+"}


def test_draw_rect_outline():
    cells, _ = render(CursesRect(size=Vector(48, 48), pos=Vector(16, 16), thickness=1))
    assert cells[(1, 1)] == "+"
    assert cells[(3, 3)] == "+"
    assert cells[(1, 2)] == "-"
    assert cells[(3, 2)] == "-"
    assert cells[(2, 1)] == "|"
    assert cells[(2, 3)] == "|"
    assert (2, 2) not in cells


def test_draw_thick_rect_fills_inside():
    cells, _ = render(CursesRect(size=Vector(48, 48), pos=Vector(16, 16), thickness=2))
    assert cells[(2, 2)] == " "


def test_negative_thickness_draws_nothing():
    cells, strings = render(CursesRect(size=Vector(48, 48), thickness=-1))
    assert cells == {}
    assert strings == []


def test_rect_clipped_to_screen():
    cells, _ = render(CursesRect(size=Vector(64, 64), pos=Vector(0, 0)), lines=2, cols=2)
    assert all(0 <= y < 2 and 0 <= x < 2 for y, x in cells)
    assert cells[(0, 0)] == "+"


def test_draw_sprite_rounds_half_away():
    sprite = CursesSprite(pos=Vector(24, 8))
    sprite.set_path("@")
    assert sprite.character == "@"
    cells, _ = render(sprite)
    assert cells == {(1, 2): "@"}


def test_draw_unknown_item_ignored():
    cells, strings = render(object())
    assert cells == {}
    assert strings == []


def test_poll_keyboard_event(terminal):
    screen = FakeScreen(keys=[ord("q")])
    display = CursesDisplay(screen=screen, terminal=terminal)
    event = display.poll_event()
    assert event.type == EventType.KEYBOARD
    assert event.data.event_type == KeyEventType.PRESS
    assert event.data.key_code == KeyCode.Q
    assert display.poll_event() is None


def test_poll_mouse_event():
    screen = FakeScreen(keys=[curses.KEY_MOUSE])
    terminal = FakeTerminal(mouse=(0, 5, 7, 0, curses.BUTTON1_PRESSED))
    display = CursesDisplay(screen=screen, terminal=terminal)
    event = display.poll_event()
    assert event.type == EventType.MOUSE
    assert event.data.position == Vector(5, 7)
    assert event.data.event_type == MouseEventType.CLICK_LEFT
    assert event.data.delta_wheel == 0.0


def test_poll_wheel_event_has_delta():
    screen = FakeScreen(keys=[curses.KEY_MOUSE])
    terminal = FakeTerminal(mouse=(0, 1, 1, 0, curses.BUTTON4_PRESSED))
    display = CursesDisplay(screen=screen, terminal=terminal)
    event = display.poll_event()
    assert event.data.event_type == MouseEventType.WHEEL_UP
    assert event.data.delta_wheel == 1.0


def test_poll_mouse_failure_gives_none():
    screen = FakeScreen(keys=[curses.KEY_MOUSE])
    display = CursesDisplay(screen=screen, terminal=FakeTerminal(mouse=None))
    assert display.poll_event() is None


def test_set_size_resizes_lines_then_columns(display, terminal):
    display.set_size(Vector(120, 40))
    assert terminal.resized == [(40, 120)]
    assert display.is_open() is True
    assert display.poll_event() is None


def test_clear_and_display(display, screen):
    display.clear()
    display.display()
    display.display()
    assert screen.erased == 1
    assert screen.refreshed == 2
    assert display.is_open() is True
    assert display.poll_event() is None


def test_set_title(display):
    display.set_title("Arcade Snake")
    assert display.title == "Arcade Snake"


def test_music_calls_leave_display_open(display):
    music = CursesMusic()
    display.play_music(music)
    display.stop_music(music)
    display.restart_music(music)
    assert display.is_open() is True


def test_close_window_once(terminal):
    screen = FakeScreen(keys=[ord("a")])
    display = CursesDisplay(screen=screen, terminal=terminal)
    display.close_window()
    display.close_window()
    assert terminal.ended == 1
    assert display.is_open() is False
    assert display.poll_event() is None
    display.draw(CursesText(text="x"))
    display.clear()
    display.set_size(Vector(10, 10))
    assert screen.strings == []
    assert screen.erased == 0
    assert terminal.resized == []


def test_context_manager_closes(terminal):
    with CursesDisplay(screen=FakeScreen(), terminal=terminal) as display:
        assert display.is_open() is True
    assert display.is_open() is False
    assert terminal.ended == 1