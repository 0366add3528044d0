"""SVG Snake — message-driven game core."""

from svg_snake.engine import Game, GameEngine, initial_game, update
from svg_snake.fruit import FruitSpawn, FruitSpawner
from svg_snake.grid import Block, same_position
from svg_snake.messages import ArrowPressed, Key, MaybeSpawnFruit, SizeUpdated, Tick
from svg_snake.snake import Direction

__all__ = [
    "ArrowPressed",
    "Block",
    "Direction",
    "FruitSpawn",
    "FruitSpawner",
    "Game",
    "GameEngine",
    "Key",
    "MaybeSpawnFruit",
    "SizeUpdated",
    "Tick",
    "initial_game",
    "same_position",
    "update",
]
