"""Snake body, fruit and board state for the classic snake game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from arcadebox.vector import Vector

INITIAL_LENGTH = 4


@dataclass
class Fruit:
    """A fruit lying on one cell of the board."""

    position: Vector


def initial_body(start: Vector) -> list[Vector]:
    """Return a body of INITIAL_LENGTH cells trailing left of start."""
    return [Vector(start.x - offset, start.y) for offset in range(INITIAL_LENGTH)]


class Snake:
    """A snake that moves one cell per step and may grow by one cell."""

    def __init__(self, start_pos: Vector) -> None:
        self.body: list[Vector] = initial_body(start_pos)
        self.direction = Vector(1, 0)
        self.speed = 1.0
        self.alive = True
        self._growth_pending = False

    @property
    def head(self) -> Vector:
        """The cell at the front of the snake."""
        return self.body[0]

    def move(self) -> None:
        """Advance one cell in the current direction; a dead snake stays put."""
        if not self.alive:
            return
        self.body.insert(0, self.body[0] + self.direction)
        if self._growth_pending:
            self._growth_pending = False
        else:
            self.body.pop()

    def grow(self) -> None:
        """Keep the tail on the next move, making the snake one cell longer."""
        self._growth_pending = True

    def change_direction(self, direction: Vector) -> None:
        """Head in a new direction, reversal included."""
        self.direction = direction.copy()


class SnakeState:
    """The board: a walled rectangle with one snake and one fruit."""

    def __init__(
        self, width: int, height: int, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.snake = Snake(Vector(width // 2, height // 2))
        self.fruit = Fruit(Vector(0, 0))
        self.spawn_fruit()

    def update(self) -> None:
        """Move the snake and let it eat the fruit it reaches."""
        self.snake.move()
        if self.check_fruit_collision():
            self.snake.grow()
            self.spawn_fruit()

    def change_direction(self, direction: Vector) -> None:
        """Turn the snake."""
        self.snake.change_direction(direction)

    def check_collision(self) -> bool:
        """Tell whether the head is on the border wall or on the body."""
        head = self.snake.head
        if (
            head.x <= 0
            or head.x >= self.width - 1
            or head.y <= 0
            or head.y >= self.height - 1
        ):
            return True
        return head in self.snake.body[1:]

    def check_fruit_collision(self) -> bool:
        """Tell whether the head is on the fruit."""
        return self.snake.head == self.fruit.position

    def spawn_fruit(self) -> None:
        """Put the fruit on a random cell inside the border."""
        x = self._rng.randrange(self.width - 2) + 1
        y = self._rng.randrange(self.height - 2) + 1
        self.fruit.position = Vector(x, y)