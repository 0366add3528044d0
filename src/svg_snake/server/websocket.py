"""WebSocket handler carrying keyboard and resize events in, frames out."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from svg_snake.server.models import client_event_adapter
from svg_snake.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


@ws_router.websocket("/play")
async def play(websocket: WebSocket) -> None:
    """Send key-down and resize events, receive a frame after each update."""
    session = _get_session(websocket)
    await websocket.accept()
    session.clients.append(websocket)
    logger.info("Client connected (%d total).", len(session.clients))

    # Send the current frame so the client has something to draw at once.
    await websocket.send_text(
        json.dumps(session.frame(), separators=(",", ":")),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                event = client_event_adapter.validate_json(raw)
            except ValidationError:
                logger.debug("Ignoring malformed client event: %r", raw)
                continue
            await session.dispatch(event.to_message())
    except WebSocketDisconnect:
        logger.info("Client disconnected.")
    finally:
        if websocket in session.clients:
            session.clients.remove(websocket)
