import random

import pytest

from arcadebox.nibbler import (
    FRUITS_PER_LEVEL,
    INITIAL_LENGTH,
    NibblerFruit,
    NibblerSnake,
    NibblerState,
)
from arcadebox.vector import Vector


def open_state(seed=3, width=32, height=24):
    state = NibblerState(width, height, random.Random(seed))
    state.walls = [[False] * width for _ in range(height)]
    state.fruits = []
    return state


def test_snake_rejects_reversal():
    snake = NibblerSnake(Vector(5, 5))
    snake.change_direction(Vector(-1, 0))
    assert snake.direction == Vector(1, 0)
    snake.change_direction(Vector(0, 1))
    assert snake.direction == Vector(0, 1)


def test_snake_grow_and_move():
    snake = NibblerSnake(Vector(5, 5))
    head = snake.head.copy()
    snake.grow()
    snake.move()
    assert snake.head == head + Vector(1, 0)
    assert len(snake.body) == INITIAL_LENGTH + 1


def test_dead_snake_stays():
    snake = NibblerSnake(Vector(5, 5))
    before = [cell.copy() for cell in snake.body]
    snake.alive = False
    snake.move()
    assert snake.body == before


@pytest.mark.parametrize("seed", range(10))
def test_level_layout_invariants(seed):
    state = NibblerState(32, 24, random.Random(seed))
    assert all(state.walls[0]) and all(state.walls[-1])
    assert all(row[0] and row[-1] for row in state.walls)
    cx, cy = state.width // 2, state.height // 2
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            assert not state.walls[cy + dy][cx + dx]
    assert len(state.fruits) == FRUITS_PER_LEVEL
    positions = [fruit.position for fruit in state.fruits]
    assert all(not state.is_wall_at(p) for p in positions)
    assert all(p not in state.snake.body for p in positions)
    assert len({(p.x, p.y) for p in positions}) == len(positions)


def test_first_level_number():
    state = NibblerState(32, 24, random.Random(0))
    assert state.level == 1
    assert not state.is_level_complete()


def test_load_next_level_resets_snake_and_advances():
    state = NibblerState(32, 24, random.Random(0))
    start = state.snake.head.copy()
    state.walls = [[False] * 32 for _ in range(24)]
    state.update()
    state.load_next_level()
    assert state.level == 2
    assert state.snake.head == start
    assert len(state.fruits) == FRUITS_PER_LEVEL


def test_off_board_is_wall():
    state = open_state()
    assert state.is_wall_at(Vector(-1, 3))
    assert state.is_wall_at(Vector(state.width, 3))
    assert state.is_wall_at(Vector(3, state.height))
    assert not state.is_wall_at(Vector(3, 3))


def test_update_moves_forward_when_open():
    state = open_state()
    head = state.snake.head.copy()
    state.update()
    assert state.snake.head == head + Vector(1, 0)


def test_update_turns_left_at_wall():
    state = open_state()
    head = state.snake.head.copy()
    state.walls[int(head.y)][int(head.x) + 1] = True
    state.update()
    assert state.snake.direction == Vector(0, -1)
    assert state.snake.head == head + Vector(0, -1)


def test_update_turns_right_when_left_blocked():
    state = open_state()
    head = state.snake.head.copy()
    x, y = int(head.x), int(head.y)
    state.walls[y][x + 1] = True
    state.walls[y - 1][x] = True
    state.update()
    assert state.snake.direction == Vector(0, 1)
    assert state.snake.head == head + Vector(0, 1)


def test_update_dies_when_boxed_in():
    state = open_state()
    before = [cell.copy() for cell in state.snake.body]
    x, y = int(state.snake.head.x), int(state.snake.head.y)
    state.walls[y][x + 1] = True
    state.walls[y - 1][x] = True
    state.walls[y + 1][x] = True
    state.update()
    assert not state.snake.alive
    assert state.snake.body == before


def test_eating_last_fruit_completes_level():
    state = open_state()
    snake = state.snake
    state.fruits = [NibblerFruit(snake.head + snake.direction)]
    state.update()
    assert state.is_level_complete()
    assert len(snake.body) == INITIAL_LENGTH
    state.update()
    assert len(snake.body) == INITIAL_LENGTH + 1


def test_change_direction_through_state():
    state = open_state()
    state.change_direction(Vector(-1, 0))
    assert state.snake.direction == Vector(1, 0)
    state.change_direction(Vector(0, 1))
    assert state.snake.direction == Vector(0, 1)


def test_self_collision():
    state = open_state()
    assert not state.check_self_collision()
    state.snake.body = [
        Vector(5, 5),
        Vector(6, 5),
        Vector(6, 6),
        Vector(5, 6),
        Vector(5, 5),
    ]
    assert state.check_self_collision()