"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from svg_snake.config import GameConfig
from svg_snake.server.routes import router
from svg_snake.server.session import GameSession
from svg_snake.server.websocket import ws_router


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.session = GameSession(config)
        app.state.session.start()
        yield
        await app.state.session.cleanup()

    app = FastAPI(title="SVG Snake", version="0.1.0", lifespan=_lifespan)
    app.include_router(router)
    app.include_router(ws_router)
    return app
