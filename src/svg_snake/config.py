"""Runtime configuration for the game server and CLI."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Game session settings.

    Supports JSON serialization so a session can be reproduced.
    """

    tick_interval_ms: int = 100
    initial_width: int = 500
    initial_height: int = 500
    seed: int | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.initial_width < 0 or self.initial_height < 0:
            raise ValueError("Initial dimensions must be non-negative.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
