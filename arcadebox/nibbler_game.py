"""The nibbler game driven by the core loop."""

from __future__ import annotations

import random
from typing import Optional

from arcadebox.events import (
    Color,
    Event,
    EventType,
    KeyboardEvent,
    KeyCode,
    KeyEventType,
    LibraryType,
)
from arcadebox.interfaces import Game, Library
from arcadebox.nibbler import INITIAL_LENGTH, NibblerState
from arcadebox.vector import Vector

NAME = "Nibbler"
LIBRARY_TYPE = LibraryType.GAME

WIDTH = 32
HEIGHT = 24
GRID_SIZE = 20
ENTITY_SIZE = 16
PADDING = 2
UPDATE_RATE = 0.15

WALL_COLOR = Color(0, 0, 255, 255)
HEAD_COLOR = Color(255, 165, 0, 255)
BODY_COLOR = Color(0, 255, 0, 255)
FRUIT_COLOR = Color(255, 0, 0, 255)
SCORE_COLOR = Color(255, 255, 255, 255)
LEVEL_COLOR = Color(200, 200, 255, 255)
WIN_COLOR = Color(255, 255, 0, 255)

WIN_MESSAGE = "VICTOIRE GG !\nAppuie sur Entree"

_DIRECTIONS = {
    KeyCode.UP: Vector(0, -1),
    KeyCode.DOWN: Vector(0, 1),
    KeyCode.LEFT: Vector(-1, 0),
    KeyCode.RIGHT: Vector(1, 0),
}


def _cell_rect(lib: Library, x: float, y: float, color: Color):
    rect = lib.rect_factory.create()
    rect.size = Vector(ENTITY_SIZE, ENTITY_SIZE)
    rect.pos = Vector(x * GRID_SIZE + PADDING, y * GRID_SIZE + PADDING)
    rect.color = color
    return rect


def _text(lib: Library, content: str, color: Color, pos: Vector):
    text = lib.text_factory.create()
    text.text = content
    text.color = color
    text.pos = pos
    return text


class NibblerGame(Game):
    """Eat every fruit of a walled level; the snake turns by itself at walls."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.state = NibblerState(WIDTH, HEIGHT, rng)
        self.update_rate = UPDATE_RATE
        self.high_score = 0
        self.waiting_for_enter = False
        self._timer = 0.0
        self._has_moved = False

    @property
    def score(self) -> int:
        """Cells gained beyond the starting length."""
        return len(self.state.snake.body) - INITIAL_LENGTH

    def init(self, lib: Library) -> None:
        """Title and size the window for the board."""
        lib.display.set_title("Arcade Nibbler")
        lib.display.set_size(Vector(WIDTH * GRID_SIZE, HEIGHT * GRID_SIZE))

    def erase(self) -> None:
        """Drop the pending step time and turn lock before leaving the library."""
        self._timer = 0.0
        self._has_moved = False

    def update(self, lib: Library, delta_time: float) -> None:
        """Step the level once every update_rate seconds; pause when it is cleared."""
        self._timer += delta_time
        if self.waiting_for_enter or self._timer < self.update_rate:
            return
        if self.state.is_level_complete():
            self.waiting_for_enter = True
        else:
            self.state.update()
            if self.state.check_self_collision():
                self.state.snake.alive = False
            self.high_score = max(self.high_score, self.score)
        self._timer = 0.0
        self._has_moved = False

    def handle_event(self, event: Event) -> None:
        """Restart on R, go to the next level on Enter, turn on arrow presses."""
        if event.type != EventType.KEYBOARD:
            return
        key = event.data
        if not isinstance(key, KeyboardEvent):
            raise TypeError("keyboard event without keyboard data")
        if key.event_type != KeyEventType.PRESS:
            return
        if key.key_code == KeyCode.R:
            self.state = NibblerState(WIDTH, HEIGHT, self._rng)
            self.waiting_for_enter = False
            self._has_moved = False
            self._timer = 0.0
            return
        if self.waiting_for_enter and key.key_code == KeyCode.ENTER:
            self.state.load_next_level()
            self.waiting_for_enter = False
            self._timer = self.update_rate
            return
        if not self.waiting_for_enter and not self._has_moved:
            direction = _DIRECTIONS.get(key.key_code)
            if direction is not None:
                self.state.change_direction(direction)
            self._has_moved = True

    def dump(self, lib: Library) -> None:
        """Draw the walls, the snake, the fruits, the score and the level."""
        display = lib.display
        display.clear()

        for y, row in enumerate(self.state.walls):
            for x, is_wall in enumerate(row):
                if is_wall:
                    wall = _cell_rect(lib, x, y, WALL_COLOR)
                    wall.thickness = 1
                    display.draw(wall)

        for index, cell in enumerate(self.state.snake.body):
            color = HEAD_COLOR if index == 0 else BODY_COLOR
            display.draw(_cell_rect(lib, cell.x, cell.y, color))

        for fruit in self.state.fruits:
            display.draw(_cell_rect(lib, fruit.position.x, fruit.position.y, FRUIT_COLOR))

        display.draw(_text(lib, f"Score: {self.score}", SCORE_COLOR, Vector(10, 10)))
        display.draw(
            _text(
                lib,
                f"Level: {self.state.level}",
                LEVEL_COLOR,
                Vector(WIDTH * GRID_SIZE - 130, 10),
            )
        )
        if self.waiting_for_enter:
            display.draw(
                _text(
                    lib,
                    WIN_MESSAGE,
                    WIN_COLOR,
                    Vector(
                        (WIDTH * GRID_SIZE) // 2 - 100,
                        (HEIGHT * GRID_SIZE) // 2 - 10,
                    ),
                )
            )

        display.display()


def entry_point() -> NibblerGame:
    """Create a new nibbler game."""
    return NibblerGame()