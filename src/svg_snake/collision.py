"""Death checks: walls and self-intersection."""

from __future__ import annotations

from svg_snake.grid import GRID_MAX, Block, same_position
from svg_snake.snake import Direction, Snake, head, tail


def out_of_bounds(block: Block, direction: Direction) -> bool:
    """Check whether moving *direction* from *block* would leave the grid.

    The test runs against the current head before it moves, so death is
    flagged while the head still sits on the edge cell.
    """
    return (
        (block.x == 0 and direction == Direction.LEFT)
        or (block.y == 0 and direction == Direction.UP)
        or (block.x == GRID_MAX and direction == Direction.RIGHT)
        or (block.y == GRID_MAX and direction == Direction.DOWN)
    )


def self_intersects(snake: Snake) -> bool:
    """Check whether the head overlaps any other segment."""
    first = head(snake)
    return any(same_position(first, seg) for seg in tail(snake))
