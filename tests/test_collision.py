"""Tests for the death checks."""

import pytest

from svg_snake.collision import out_of_bounds, self_intersects
from svg_snake.grid import Block
from svg_snake.snake import Direction, initial_snake


class TestOutOfBounds:
    @pytest.mark.parametrize(
        ("block", "direction"),
        [
            (Block(0, 10), Direction.LEFT),
            (Block(10, 0), Direction.UP),
            (Block(49, 10), Direction.RIGHT),
            (Block(10, 49), Direction.DOWN),
        ],
    )
    def test_edge_facing_out(self, block, direction):
        assert out_of_bounds(block, direction)

    def test_edge_facing_along(self):
        assert not out_of_bounds(Block(0, 10), Direction.UP)
        assert not out_of_bounds(Block(49, 10), Direction.DOWN)

    def test_one_cell_before_edge(self):
        assert not out_of_bounds(Block(48, 10), Direction.RIGHT)

    def test_corner(self):
        assert out_of_bounds(Block(0, 0), Direction.UP)
        assert out_of_bounds(Block(0, 0), Direction.LEFT)
        assert not out_of_bounds(Block(0, 0), Direction.RIGHT)


class TestSelfIntersection:
    def test_straight_snake(self):
        assert not self_intersects(initial_snake())

    def test_single_segment(self):
        assert not self_intersects((Block(1, 1),))

    def test_head_on_body(self):
        snake = (Block(5, 5), Block(6, 5), Block(6, 6), Block(5, 6), Block(5, 5))
        assert self_intersects(snake)
