"""Tests for the game session and its tick loop."""

from __future__ import annotations

import asyncio

import pytest

from svg_snake.config import GameConfig
from svg_snake.messages import ArrowPressed, Key, SizeUpdated, Tick
from svg_snake.server.session import GameSession


class TestDispatch:
    @pytest.mark.asyncio
    async def test_dispatch_updates_engine(self):
        session = GameSession(GameConfig(seed=0))
        await session.dispatch(ArrowPressed(Key.SPACE))
        assert session.engine.game.paused

    @pytest.mark.asyncio
    async def test_frame_contents(self):
        session = GameSession(GameConfig(seed=0))
        await session.dispatch(SizeUpdated(200, 100))
        frame = session.frame()
        assert frame["state"]["width"] == 200
        assert 'width="100"' in frame["svg"]

    @pytest.mark.asyncio
    async def test_paused_ticks_do_nothing(self):
        session = GameSession(GameConfig(seed=0))
        await session.dispatch(ArrowPressed(Key.SPACE))
        before = session.engine.game
        await session.dispatch(Tick())
        assert session.engine.game == before


class TestTickLoop:
    @pytest.mark.asyncio
    async def test_loop_ticks_and_cleans_up(self):
        session = GameSession(GameConfig(tick_interval_ms=10, seed=0))
        session.start()
        await asyncio.sleep(0.2)
        await session.cleanup()
        ticks = session.engine.tick_count
        assert ticks > 0
        await asyncio.sleep(0.05)
        assert session.engine.tick_count == ticks

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self):
        session = GameSession(GameConfig(tick_interval_ms=1000))
        session.start()
        task = session._task
        session.start()
        assert session._task is task
        await session.cleanup()
