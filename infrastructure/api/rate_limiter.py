"""Token-bucket rate limiter for Riot API requests."""
import asyncio
import math
import time
import logging
from collections import deque
from typing import Awaitable, Callable, Deque, Optional, Tuple

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


class TokenBucket:
    """
    Token bucket shared by every outbound Riot call in the process.

      - Burst capacity and refill rate are both ``tokens_per_second``.
      - A free token is taken immediately; otherwise the caller is queued
        and released strictly in arrival order by a single drain task.
      - The drain task sleeps exactly until the next token is due
        instead of polling.

    All mutation happens on the event loop with no await between refill and
    decrement, so accounting stays consistent without a lock.
    """

    def __init__(
        self,
        tokens_per_second: float = 18,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ):
        if tokens_per_second <= 0:
            raise ValueError("tokens_per_second must be positive")
        self.max_tokens = float(tokens_per_second)
        self.tokens = self.max_tokens
        self.refill_rate_per_ms = self.max_tokens / 1000.0
        self._clock = clock
        self._sleep = sleep
        self.last_refill_at = clock()

        self._waiters: Deque[asyncio.Future] = deque()
        self._drain_task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        return len(self._waiters)

    def _refill(self) -> None:
        now = self._clock()
        elapsed_ms = (now - self.last_refill_at) * 1000.0
        if elapsed_ms > 0:
            self.tokens = min(self.max_tokens, self.tokens + elapsed_ms * self.refill_rate_per_ms)
        self.last_refill_at = now

    async def acquire(self) -> None:
        """Wait until a token is available, then consume it."""
        self._refill()

        # Never jump ahead of callers already queued.
        if self.tokens >= 1 and not self._waiters:
            self.tokens -= 1
            return

        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._waiters.append(waiter)
        if self._drain_task is None or self._drain_task.done():
            self._drain_task = loop.create_task(self._drain())
        try:
            await waiter
        except asyncio.CancelledError:
            if waiter.done() and not waiter.cancelled():
                # granted, but the caller went away before using it
                self.tokens = min(self.max_tokens, self.tokens + 1)
            raise

    async def _drain(self) -> None:
        while self._waiters:
            self._refill()

            head = self._waiters[0]
            if head.done():
                # caller was cancelled while queued
                self._waiters.popleft()
                continue

            if self.tokens >= 1:
                self.tokens -= 1
                self._waiters.popleft()
                head.set_result(None)
            else:
                wait_ms = math.ceil((1 - self.tokens) / self.refill_rate_per_ms)
                logger.debug(f"Rate limit: {len(self._waiters)} queued, waiting {wait_ms}ms")
                await self._sleep(wait_ms / 1000.0)

    def get_status(self) -> Tuple[float, float, int]:
        """(available tokens, capacity, queued callers) after a refill."""
        self._refill()
        return self.tokens, self.max_tokens, len(self._waiters)
