"""HTTP route handlers: client page, state snapshot, and SVG scene."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from svg_snake.render import project, to_svg
from svg_snake.server.session import GameSession

router = APIRouter()

# The browser is the window: it reports key-downs and resizes over the
# socket and swaps in each SVG frame it receives.
INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>SVG Snake</title>
<style>html, body { margin: 0; background: #222; overflow: hidden; }</style>
</head>
<body>
<div id="scene"></div>
<script>
const scene = document.getElementById("scene");
const proto = location.protocol === "https:" ? "wss" : "ws";
const ws = new WebSocket(`${proto}://${location.host}/play`);
function sendSize() {
  ws.send(JSON.stringify({
    type: "resize", width: window.innerWidth, height: window.innerHeight,
  }));
}
ws.onopen = sendSize;
ws.onmessage = (event) => { scene.innerHTML = JSON.parse(event.data).svg; };
window.addEventListener("resize", () => {
  if (ws.readyState === WebSocket.OPEN) sendSize();
});
document.addEventListener("keydown", (event) => {
  if (ws.readyState === WebSocket.OPEN) {
    ws.send(JSON.stringify({ type: "keydown", key_code: event.keyCode }));
  }
});
</script>
</body>
</html>
"""


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the browser client."""
    return HTMLResponse(INDEX_HTML)


@router.get("/state")
async def get_state(request: Request) -> dict:
    """Return the current game state."""
    return _get_session(request).engine.get_state()


@router.get("/scene.svg")
async def get_scene(request: Request) -> Response:
    """Return the current frame as an SVG document."""
    game = _get_session(request).engine.game
    return Response(content=to_svg(project(game)), media_type="image/svg+xml")
