"""Fixed 50×50 grid geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

GRID_SIZE = 50
GRID_MAX = GRID_SIZE - 1


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    FRUIT = 2


@dataclass(frozen=True)
class Block:
    """A single grid cell.

    Coordinates use (x, y) ordering with the origin at the top-left corner.
    Bounds are a game invariant and are not checked here.
    """

    x: int
    y: int

    def to_list(self) -> list[int]:
        return [self.x, self.y]


def same_position(a: Block, b: Block) -> bool:
    """Check whether two blocks occupy the same cell."""
    return a.x == b.x and a.y == b.y


def in_bounds(block: Block) -> bool:
    """Check whether a block lies within the grid."""
    return 0 <= block.x <= GRID_MAX and 0 <= block.y <= GRID_MAX


def occupancy(snake: Iterable[Block], fruit: Block | None) -> np.ndarray:
    """Rasterize the snake and fruit into a (row, col) cell array.

    Rows index ``y`` and columns index ``x``, matching NumPy ordering.
    The snake is painted last so it wins over a fruit spawned beneath it.
    """
    cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    if fruit is not None and in_bounds(fruit):
        cells[fruit.y, fruit.x] = CellType.FRUIT
    for block in snake:
        if in_bounds(block):
            cells[block.y, block.x] = CellType.SNAKE
    return cells
