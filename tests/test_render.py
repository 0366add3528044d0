"""Tests for the state to SVG projection."""

from dataclasses import replace

from svg_snake.engine import initial_game
from svg_snake.grid import Block
from svg_snake.render import (
    BACKGROUND_FILL,
    FRUIT_FILL,
    SNAKE_FILL,
    Rect,
    Viewport,
    project,
    to_svg,
)


class TestViewport:
    def test_fits_smaller_dimension(self):
        viewport = Viewport.fit(800, 600)
        assert viewport.size == 600
        assert viewport.scale == 12.0

    def test_portrait(self):
        assert Viewport.fit(300, 900).size == 300

    def test_negative_clamped(self):
        assert Viewport.fit(-10, 200).size == 0


class TestProject:
    def test_background_then_snake(self):
        scene = project(initial_game(500, 500))
        assert scene.rects[0] == Rect(0, 0, 50, 50, BACKGROUND_FILL)
        assert len(scene.rects) == 4
        assert scene.rects[1] == Rect(25, 25, 1, 1, SNAKE_FILL)
        assert scene.viewport.size == 500

    def test_fruit_square(self):
        game = replace(initial_game(), fruit=Block(7, 8))
        scene = project(game)
        assert len(scene.rects) == 5
        assert scene.rects[-1] == Rect(7, 8, 1, 1, FRUIT_FILL)

    def test_pure(self):
        game = initial_game(100, 100)
        assert project(game) == project(game)
        assert game == initial_game(100, 100)


class TestToSvg:
    def test_document(self):
        svg = to_svg(project(initial_game(640, 480)))
        assert svg.startswith("<svg")
        assert 'viewBox="0 0 50 50"' in svg
        assert 'width="480"' in svg
        assert svg.count("<rect") == 4

    def test_rect_markup(self):
        rect = Rect(1, 2, 1, 1, "#fff")
        assert rect.to_svg() == '<rect x="1" y="2" width="1" height="1" fill="#fff"/>'
