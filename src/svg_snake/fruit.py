"""Random fruit spawning and consumption."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from svg_snake.grid import GRID_SIZE, Block

logger = logging.getLogger(__name__)

# One accepted roll in SPAWN_ODDS, i.e. a 10% chance per draw.
SPAWN_ODDS = 10


@dataclass(frozen=True)
class FruitSpawn:
    """A candidate fruit position plus its acceptance roll in [0, 9]."""

    candidate: Block
    roll: int

    @property
    def accepted(self) -> bool:
        return self.roll == 0


class FruitSpawner:
    """Draws fruit spawn candidates.

    Uses an unseeded NumPy RNG unless one is supplied, so draws are not
    replayable across runs by default.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def roll(self) -> FruitSpawn:
        """Draw a candidate cell and an acceptance value."""
        x, y = self.rng.integers(0, GRID_SIZE, size=2)
        roll = self.rng.integers(0, SPAWN_ODDS)
        return FruitSpawn(candidate=Block(int(x), int(y)), roll=int(roll))


def apply_spawn(fruit: Block | None, spawn: FruitSpawn) -> Block | None:
    """Place the candidate if the board has no fruit and the roll is accepted.

    The candidate is not checked against the snake, so fruit may appear on
    top of the body.
    """
    if fruit is not None or not spawn.accepted:
        return fruit
    logger.debug("Fruit spawned at (%d, %d).", spawn.candidate.x, spawn.candidate.y)
    return spawn.candidate


def update_fruit(fruit: Block | None, ate_fruit: bool) -> Block | None:
    """Clear the fruit once it has been eaten."""
    if ate_fruit:
        return None
    return fruit
