"""Snake, fruits and walled levels for the nibbler game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from arcadebox.vector import Vector

INITIAL_LENGTH = 4
FRUITS_PER_LEVEL = 10


@dataclass
class NibblerFruit:
    """A fruit lying on one cell of the level."""

    position: Vector


class NibblerSnake:
    """A snake that cannot turn back on itself."""

    def __init__(self, start_pos: Vector) -> None:
        self.body: list[Vector] = [
            Vector(start_pos.x - offset, start_pos.y) for offset in range(INITIAL_LENGTH)
        ]
        self.direction = Vector(1, 0)
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
        """Head in a new direction unless it is the exact reverse."""
        if self.direction.x + direction.x == 0 and self.direction.y + direction.y == 0:
            return
        self.direction = direction.copy()


class NibblerState:
    """A level: walls, fruits and a snake that turns along walls."""

    def __init__(
        self, width: int, height: int, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._level = 1
        self.snake = NibblerSnake(self._center())
        self.fruits: list[NibblerFruit] = []
        self.walls: list[list[bool]] = []
        self.load_next_level()

    @property
    def level(self) -> int:
        """The number of the level being played, from 1."""
        return self._level - 1

    def _center(self) -> Vector:
        return Vector(self.width // 2, self.height // 2)

    def load_next_level(self) -> None:
        """Build the next level: border, random walls, fresh snake and fruits."""
        self._level += 1
        self.walls = [[False] * self.width for _ in range(self.height)]
        for x in range(self.width):
            self.walls[0][x] = True
            self.walls[self.height - 1][x] = True
        for row in self.walls:
            row[0] = True
            row[self.width - 1] = True
        self.snake = NibblerSnake(self._center())
        self.fruits = []
        self._generate_walls(self._level)
        self._generate_fruits()

    def _generate_walls(self, level: int) -> None:
        rng = self._rng
        cx, cy = self.width // 2, self.height // 2
        for _ in range(10 + level * 2):
            horizontal = rng.randrange(2) == 1
            length = 3 + rng.randrange(4)
            x = rng.randrange(self.width - (length + 2 if horizontal else 2)) + 1
            y = rng.randrange(self.height - (2 if horizontal else length + 2)) + 1
            for step in range(length):
                dx = x + step if horizontal else x
                dy = y if horizontal else y + step
                if cx - 1 <= dx <= cx + 1 and cy - 1 <= dy <= cy + 1:
                    continue
                self.walls[dy][dx] = True

    def _generate_fruits(self) -> None:
        while len(self.fruits) < FRUITS_PER_LEVEL:
            pos = Vector(self._rng.randrange(self.width), self._rng.randrange(self.height))
            if self.is_wall_at(pos) or pos in self.snake.body:
                continue
            if any(fruit.position == pos for fruit in self.fruits):
                continue
            self.fruits.append(NibblerFruit(pos))

    def update(self) -> None:
        """Move the snake, turning left or right at a wall, dying if boxed in."""
        snake = self.snake
        direction = snake.direction
        if self.is_wall_at(snake.head + direction):
            left = Vector(direction.y, -direction.x)
            right = Vector(-direction.y, direction.x)
            if not self.is_wall_at(snake.head + left):
                snake.change_direction(left)
            elif not self.is_wall_at(snake.head + right):
                snake.change_direction(right)
            else:
                snake.alive = False
                return
        snake.move()
        self.check_fruit_collision()

    def change_direction(self, direction: Vector) -> None:
        """Turn the snake, ignoring reversals."""
        self.snake.change_direction(direction)

    def check_self_collision(self) -> bool:
        """Tell whether the head overlaps the rest of the body."""
        return self.snake.head in self.snake.body[1:]

    def check_fruit_collision(self) -> None:
        """Eat the fruit under the head, if any, and grow."""
        head = self.snake.head
        for index, fruit in enumerate(self.fruits):
            if fruit.position == head:
                del self.fruits[index]
                self.snake.grow()
                return

    def is_level_complete(self) -> bool:
        """Tell whether every fruit has been eaten."""
        return not self.fruits

    def is_wall_at(self, pos: Vector) -> bool:
        """Tell whether a cell is a wall; cells off the board count as walls."""
        x, y = int(pos.x), int(pos.y)
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return True
        return self.walls[y][x]