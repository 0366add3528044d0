"""Message-driven game state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

import numpy as np

from svg_snake.collision import out_of_bounds, self_intersects
from svg_snake.fruit import FruitSpawner, apply_spawn, update_fruit
from svg_snake.grid import Block, occupancy, same_position
from svg_snake.messages import (
    ArrowPressed,
    Key,
    MaybeSpawnFruit,
    Message,
    SizeUpdated,
    Tick,
)
from svg_snake.snake import Direction, Snake, head, initial_snake, move, turn

logger = logging.getLogger(__name__)

_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.LEFT: Direction.LEFT,
    Key.UP: Direction.UP,
    Key.RIGHT: Direction.RIGHT,
    Key.DOWN: Direction.DOWN,
}


@dataclass(frozen=True)
class Game:
    """Complete game state. Transitions build new values via :func:`update`."""

    direction: Direction
    width: int
    height: int
    snake: Snake
    is_dead: bool = False
    fruit: Block | None = None
    ate_fruit: bool = False
    paused: bool = False

    @property
    def status(self) -> str:
        """Lifecycle label; dead takes precedence over paused."""
        if self.is_dead:
            return "dead"
        if self.paused:
            return "paused"
        return "running"

    @property
    def live(self) -> bool:
        return not (self.is_dead or self.paused)

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "status": self.status,
            "direction": self.direction.name.lower(),
            "width": self.width,
            "height": self.height,
            "snake": [seg.to_list() for seg in self.snake],
            "fruit": self.fruit.to_list() if self.fruit is not None else None,
            "is_dead": self.is_dead,
            "ate_fruit": self.ate_fruit,
            "paused": self.paused,
            "cells": occupancy(self.snake, self.fruit).tolist(),
        }


def initial_game(width: int = 0, height: int = 0) -> Game:
    """Starting state: three cells moving right, no fruit."""
    return Game(
        direction=Direction.RIGHT,
        width=width,
        height=height,
        snake=initial_snake(),
    )


# --- tick pipeline ---


def check_out_of_bounds(game: Game) -> Game:
    dead = game.is_dead or out_of_bounds(head(game.snake), game.direction)
    return replace(game, is_dead=dead)


def check_self_intersection(game: Game) -> Game:
    dead = game.is_dead or self_intersects(game.snake)
    return replace(game, is_dead=dead)


def check_ate_fruit(game: Game) -> Game:
    ate = game.fruit is not None and same_position(head(game.snake), game.fruit)
    return replace(game, ate_fruit=ate)


def move_snake(game: Game) -> Game:
    """Advance the snake unless it is already dead."""
    if game.is_dead:
        return game
    return replace(
        game, snake=move(game.snake, game.direction, grow=game.ate_fruit),
    )


def update_fruit_state(game: Game) -> Game:
    return replace(game, fruit=update_fruit(game.fruit, game.ate_fruit))


# Growth and death timing depend on this order: the eaten check and the move
# both see the head from before the move.
TICK_PIPELINE: tuple[Callable[[Game], Game], ...] = (
    check_out_of_bounds,
    check_self_intersection,
    check_ate_fruit,
    move_snake,
    update_fruit_state,
)


def tick(game: Game) -> Game:
    """Run one gameplay step; paused or dead games are returned untouched."""
    if not game.live:
        return game
    for stage in TICK_PIPELINE:
        game = stage(game)
    return game


def update(game: Game, message: Message) -> Game:
    """Apply one message and return the next state."""
    match message:
        case Tick():
            return tick(game)
        case ArrowPressed(key=Key.SPACE):
            return replace(game, paused=not game.paused)
        case ArrowPressed(key=key):
            requested = _KEY_DIRECTIONS.get(key)
            if requested is None:
                return game
            return replace(game, direction=turn(game.direction, requested))
        case SizeUpdated(width=width, height=height):
            return replace(game, width=width, height=height)
        case MaybeSpawnFruit(spawn=spawn):
            if game.is_dead:
                return game
            return replace(game, fruit=apply_spawn(game.fruit, spawn))
        case _:
            raise TypeError(f"Unsupported message: {message!r}")


class GameEngine:
    """Owns the single live :class:`Game` and feeds messages through it.

    After every processed tick that leaves the board without fruit, the
    engine draws a spawn candidate and dispatches it as a
    :class:`MaybeSpawnFruit` message before returning.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        spawner: FruitSpawner | None = None,
        seed: int | None = None,
    ) -> None:
        self.game = initial_game(width, height)
        self.spawner = (
            spawner if spawner is not None
            else FruitSpawner(np.random.default_rng(seed))
        )
        self.tick_count = 0

    def dispatch(self, message: Message) -> Game:
        """Apply *message* (and any follow-up spawn roll); return the state."""
        previous = self.game
        self.game = update(previous, message)

        if isinstance(message, ArrowPressed) and message.key is Key.SPACE:
            logger.debug("Game %s.", "paused" if self.game.paused else "resumed")

        if isinstance(message, Tick) and previous.live:
            self.tick_count += 1
            if self.game.is_dead:
                logger.info(
                    "Snake died at tick %d with length %d.",
                    self.tick_count, len(self.game.snake),
                )
            elif self.game.fruit is None:
                self.dispatch(MaybeSpawnFruit(self.spawner.roll()))

        return self.game

    def get_state(self) -> dict:
        """Return the current state with the processed tick count."""
        state = self.game.to_dict()
        state["tick"] = self.tick_count
        return state
