"""Shared test fixtures."""

# ruff: noqa: E402  -- node id must be in the env before config.settings is imported

import os

os.environ.setdefault("SNOWFLAKE_NODE_ID", "1")

from collections import deque

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app


class FakeClock:
    """Deterministic Clock: returns `now`, or queued readings first if any.

    sleep_ms() advances `now` by the slept amount and records it.
    """

    def __init__(self, now: int = 1000) -> None:
        self.now = now
        self.readings: deque[int] = deque()
        self.slept: list[int] = []

    def elapsed_ms(self) -> int:
        if self.readings:
            self.now = self.readings.popleft()
        return self.now

    def sleep_ms(self, ms: int) -> None:
        self.slept.append(ms)
        self.now += ms


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
