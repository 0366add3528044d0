"""Single game session: serialized dispatch, tick loop, and broadcasting."""

from __future__ import annotations

import asyncio
import json
import logging
import time

from starlette.websockets import WebSocket, WebSocketState

from svg_snake.config import GameConfig
from svg_snake.engine import GameEngine
from svg_snake.messages import Message, Tick
from svg_snake.render import project, to_svg

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the engine and runs the fixed-rate tick loop.

    Every message, from the timer or from a client, goes through
    :meth:`dispatch`, which holds a lock so transitions never overlap.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.engine = GameEngine(
            width=self.config.initial_width,
            height=self.config.initial_height,
            seed=self.config.seed,
        )
        self.clients: list[WebSocket] = []
        self.lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    def frame(self) -> dict:
        """Current state snapshot plus its SVG rendering."""
        return {
            "state": self.engine.get_state(),
            "svg": to_svg(project(self.engine.game)),
        }

    async def dispatch(self, message: Message) -> None:
        """Apply one message and push the new frame to every client."""
        async with self.lock:
            self.engine.dispatch(message)
            frame = self.frame()
        await self._broadcast(frame)

    def start(self) -> None:
        """Start the tick loop if it is not already running."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._tick_loop())
            logger.info(
                "Tick loop started (interval=%dms).", self.config.tick_interval_ms,
            )

    async def _tick_loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.config.tick_interval)
                await self.dispatch(Tick(timestamp=time.time()))
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")
        except Exception:
            logger.exception("Tick loop error.")

    async def _broadcast(self, frame: dict) -> None:
        payload = json.dumps(frame, separators=(",", ":"))
        dead_clients: list[WebSocket] = []
        for ws in list(self.clients):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead_clients.append(ws)
        for ws in dead_clients:
            if ws in self.clients:
                self.clients.remove(ws)

    async def cleanup(self) -> None:
        """Cancel the tick loop and forget connected clients."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self.clients.clear()
        logger.info("GameSession cleanup complete.")
