"""WebSocket integration tests for keyboard and resize events."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient

from svg_snake.config import GameConfig
from svg_snake.server.app import create_app
from svg_snake.server.session import GameSession


@pytest.fixture()
def tc():
    """Sync TestClient without lifespan, so no tick loop is running."""
    application = create_app()
    application.state.session = GameSession(GameConfig(seed=0))
    return TestClient(application)


def _send(ws, payload) -> dict:
    ws.send_text(json.dumps(payload))
    return json.loads(ws.receive_text())


class TestPlayWebSocket:
    def test_connect_and_receive_initial_frame(self, tc):
        with tc.websocket_connect("/play") as ws:
            frame = json.loads(ws.receive_text())
            assert frame["state"]["status"] == "running"
            assert frame["svg"].startswith("<svg")

    def test_space_pauses(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            frame = _send(ws, {"type": "keydown", "key_code": 32})
            assert frame["state"]["paused"] is True
            assert frame["state"]["status"] == "paused"

    def test_arrow_turns(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            frame = _send(ws, {"type": "keydown", "key_code": 38})
            assert frame["state"]["direction"] == "up"
            frame = _send(ws, {"type": "keydown", "key_code": 40})
            assert frame["state"]["direction"] == "up"

    def test_unknown_key_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            frame = _send(ws, {"type": "keydown", "key_code": 65})
            assert frame["state"]["direction"] == "right"
            assert frame["state"]["paused"] is False

    def test_resize(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            frame = _send(ws, {"type": "resize", "width": 1024, "height": 768})
            assert frame["state"]["width"] == 1024
            assert frame["state"]["height"] == 768
            assert 'width="768"' in frame["svg"]

    def test_malformed_events_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            ws.receive_text()
            ws.send_text("not json")
            ws.send_text(json.dumps({"type": "jump"}))
            ws.send_text(json.dumps({"type": "resize", "width": -5, "height": 1}))
            frame = _send(ws, {"type": "keydown", "key_code": 32})
            assert frame["state"]["paused"] is True
            assert frame["state"]["width"] == 500
