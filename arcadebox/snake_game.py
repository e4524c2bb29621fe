"""The snake game driven by the core loop."""

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
from arcadebox.snake import INITIAL_LENGTH, SnakeState
from arcadebox.vector import Vector

NAME = "Snake"
LIBRARY_TYPE = LibraryType.GAME

GRID_SIZE = 20
WIDTH = 32
HEIGHT = 24
ENTITY_SIZE = 14
PADDING = (GRID_SIZE - ENTITY_SIZE) // 2
UPDATE_RATE = 0.15

WALL_COLOR = Color(0, 0, 255, 255)
HEAD_COLOR = Color(139, 69, 19, 255)
BODY_COLOR = Color(0, 255, 0, 255)
FRUIT_COLOR = Color(255, 0, 0, 255)
TEXT_COLOR = Color(255, 255, 255, 255)

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


class SnakeGame(Game):
    """Steer the snake to eat fruit without hitting the border or itself."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng
        self.state = SnakeState(WIDTH, HEIGHT, rng)
        self.update_rate = UPDATE_RATE
        self.high_score = 0
        self._timer = 0.0
        self._has_moved = False

    @property
    def score(self) -> int:
        """Cells gained beyond the starting length."""
        return len(self.state.snake.body) - INITIAL_LENGTH

    def init(self, lib: Library) -> None:
        """Title and size the window for the board."""
        lib.display.set_title("Arcade Snake")
        lib.display.set_size(Vector(WIDTH * GRID_SIZE, HEIGHT * GRID_SIZE))
        self._has_moved = False

    def erase(self) -> None:
        """Drop the pending step time and turn lock before leaving the library."""
        self._timer = 0.0
        self._has_moved = False

    def update(self, lib: Library, delta_time: float) -> None:
        """Step the board once every update_rate seconds."""
        self._timer += delta_time
        if self._timer < self.update_rate:
            return
        self.state.update()
        if self.state.check_collision():
            self.state.snake.alive = False
        self.high_score = max(self.high_score, self.score)
        self._timer = 0.0

    def handle_event(self, event: Event) -> None:
        """Turn on arrow presses; restart on R."""
        if event.type != EventType.KEYBOARD:
            return
        key = event.data
        if not isinstance(key, KeyboardEvent):
            raise TypeError("keyboard event without keyboard data")
        if key.event_type == KeyEventType.PRESS:
            direction = _DIRECTIONS.get(key.key_code)
            if direction is not None:
                self.state.change_direction(direction)
            self._has_moved = True
        if key.key_code == KeyCode.R:
            self.state = SnakeState(WIDTH, HEIGHT, self._rng)
            self._timer = 0.0
            self._has_moved = False

    def dump(self, lib: Library) -> None:
        """Draw the border, the snake, the fruit and the score."""
        display = lib.display
        display.clear()
        for y in range(HEIGHT):
            for x in range(WIDTH):
                if y in (0, HEIGHT - 1) or x in (0, WIDTH - 1):
                    wall = _cell_rect(lib, x, y, WALL_COLOR)
                    wall.thickness = 1
                    display.draw(wall)

        for index, cell in enumerate(self.state.snake.body):
            color = HEAD_COLOR if index == 0 else BODY_COLOR
            display.draw(_cell_rect(lib, cell.x, cell.y, color))

        fruit = self.state.fruit.position
        display.draw(_cell_rect(lib, fruit.x, fruit.y, FRUIT_COLOR))

        score_text = lib.text_factory.create()
        score_text.text = f"Score: {self.score}"
        score_text.color = TEXT_COLOR
        score_text.pos = Vector(10, 10)
        display.draw(score_text)

        display.display()


def entry_point() -> SnakeGame:
    """Create a new snake game."""
    return SnakeGame()