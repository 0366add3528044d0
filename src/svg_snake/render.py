"""Projection of game state onto SVG shapes."""

from __future__ import annotations

from dataclasses import dataclass

from svg_snake.engine import Game
from svg_snake.grid import GRID_SIZE

BACKGROUND_FILL = "#000"
SNAKE_FILL = "#fff"
FRUIT_FILL = "#f00"


@dataclass(frozen=True)
class Viewport:
    """Square pixel area that fits the logical grid inside the window."""

    size: int

    @classmethod
    def fit(cls, width: int, height: int) -> Viewport:
        """Fit the grid to the smaller window dimension."""
        return cls(size=max(0, min(width, height)))

    @property
    def scale(self) -> float:
        """Pixels per grid cell."""
        return self.size / GRID_SIZE


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in logical grid units."""

    x: int
    y: int
    width: int
    height: int
    fill: str

    def to_svg(self) -> str:
        return (
            f'<rect x="{self.x}" y="{self.y}" width="{self.width}" '
            f'height="{self.height}" fill="{self.fill}"/>'
        )


@dataclass(frozen=True)
class Scene:
    viewport: Viewport
    rects: tuple[Rect, ...]


def _cell(x: int, y: int, fill: str) -> Rect:
    return Rect(x=x, y=y, width=1, height=1, fill=fill)


def project(game: Game) -> Scene:
    """Map a game snapshot to drawable shapes: background, snake, fruit."""
    rects = [Rect(0, 0, GRID_SIZE, GRID_SIZE, BACKGROUND_FILL)]
    rects.extend(_cell(seg.x, seg.y, SNAKE_FILL) for seg in game.snake)
    if game.fruit is not None:
        rects.append(_cell(game.fruit.x, game.fruit.y, FRUIT_FILL))
    return Scene(viewport=Viewport.fit(game.width, game.height), rects=tuple(rects))


def to_svg(scene: Scene) -> str:
    """Serialize a scene as a standalone SVG document."""
    size = scene.viewport.size
    body = "".join(rect.to_svg() for rect in scene.rects)
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{size}" height="{size}" '
        f'viewBox="0 0 {GRID_SIZE} {GRID_SIZE}">{body}</svg>'
    )
