"""Typed events delivered into the game engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from svg_snake.fruit import FruitSpawn


class Key(enum.Enum):
    """Keys the game reacts to; anything else collapses to ``UNKNOWN``."""

    SPACE = 32
    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40
    UNKNOWN = -1


def key_from_code(code: int) -> Key:
    """Map a DOM key-down code to a :class:`Key`."""
    try:
        key = Key(code)
    except ValueError:
        return Key.UNKNOWN
    return Key.UNKNOWN if key is Key.UNKNOWN else key


@dataclass(frozen=True)
class Tick:
    """Fixed-interval timer event. The timestamp is informational only."""

    timestamp: float = 0.0


@dataclass(frozen=True)
class ArrowPressed:
    key: Key


@dataclass(frozen=True)
class SizeUpdated:
    width: int
    height: int


@dataclass(frozen=True)
class MaybeSpawnFruit:
    spawn: FruitSpawn


Message = Union[Tick, ArrowPressed, SizeUpdated, MaybeSpawnFruit]
