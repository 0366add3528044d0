"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from svg_snake.grid import GRID_SIZE, Block

Snake = tuple[Block, ...]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

INITIAL_LENGTH = 3


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


def turn(current: Direction, requested: Direction) -> Direction:
    """Return the new heading, ignoring 180° reversals."""
    if requested == opposite(current):
        return current
    return requested


def initial_snake() -> Snake:
    """Build the three-cell starting snake, head at the grid centre."""
    centre = GRID_SIZE // 2
    return tuple(Block(centre - i, centre) for i in range(INITIAL_LENGTH))


def head(snake: Snake) -> Block:
    """Return the head segment.

    Every reachable snake has at least one segment, so an empty one is a bug.
    """
    assert snake, "snake must not be empty"  # noqa: S101
    return snake[0]


def tail(snake: Snake) -> Snake:
    """Return every segment except the head."""
    return snake[1:]


def step_block(block: Block, direction: Direction) -> Block:
    """Offset a block by one cell in *direction*."""
    dx, dy = direction.value
    return Block(block.x + dx, block.y + dy)


def move(snake: Snake, direction: Direction, grow: bool = False) -> Snake:
    """Advance the snake one cell.

    The whole previous body follows the new head when *grow* is set,
    otherwise the last segment is dropped. Coordinates are not clamped.
    """
    new_head = step_block(head(snake), direction)
    body = snake if grow else snake[:-1]
    return (new_head, *body)
