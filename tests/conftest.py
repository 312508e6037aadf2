import asyncio
from typing import Callable, List

import httpx
import pytest

from domain.entities import match_id_of
from domain.interfaces import IMatchCache
from infrastructure.api import RiotAPIClient, TokenBucket


class SleepRecorder:
    """Stand-in for asyncio.sleep that records durations and returns at once."""

    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


class FakeClock:
    """Monotonic clock whose sleep advances time instead of waiting."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        # let woken waiters run before time moves on
        await asyncio.sleep(0)
        self.now += seconds


class CountingBucket(TokenBucket):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.acquired = 0

    async def acquire(self) -> None:
        await super().acquire()
        self.acquired += 1


class GatedCache(IMatchCache):
    """Cache whose writes only complete once ``release`` is set."""

    def __init__(self) -> None:
        self.release = asyncio.Event()
        self.stored: List[str] = []

    async def get(self, match_id):
        return None

    async def get_many(self, match_ids):
        return {}

    async def put(self, match, region):
        await self.release.wait()
        self.stored.append(match_id_of(match))

    async def put_many(self, matches, region):
        for match in matches:
            await self.put(match, region)


def match_payload(match_id: str, **info) -> dict:
    return {
        "metadata": {"matchId": match_id, "participants": [], "dataVersion": "2"},
        "info": {"gameMode": "CLASSIC", "gameDuration": 1800, **info},
    }


@pytest.fixture
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_client(sleeps) -> Callable[..., RiotAPIClient]:
    def _make(handler, **kwargs) -> RiotAPIClient:
        kwargs.setdefault("rate_limiter", CountingBucket(1000))
        kwargs.setdefault("max_retries", 3)
        kwargs.setdefault("retry_after_fallback", 2)
        kwargs.setdefault("match_batch_size", 5)
        client = RiotAPIClient("test-key", transport=httpx.MockTransport(handler), **kwargs)
        client._sleep = sleeps
        return client

    return _make
