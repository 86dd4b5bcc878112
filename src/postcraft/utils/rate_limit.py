"""Rate limiters gating calls to upstream services.

Batched embedding runs chunk after chunk; between two chunks the caller
awaits ``acquire()`` on a limiter. Swapping the limiter changes the pacing
policy without touching the embedding code.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

Sleep = Callable[[float], Awaitable[None]]
Clock = Callable[[], float]


@runtime_checkable
class RateLimiter(Protocol):
    """Gate awaited before every rate-limited call."""

    async def acquire(self) -> None: ...


class NoopRateLimiter:
    """Never waits."""

    async def acquire(self) -> None:
        return None


class FixedDelayRateLimiter:
    """Sleeps a fixed delay on every ``acquire()``.

    Callers acquire between two calls, after the previous one has finished,
    so the delay separates the end of one call from the start of the next.
    """

    def __init__(self, delay: float, *, sleep: Sleep = asyncio.sleep) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay
        self._sleep = sleep

    @property
    def delay(self) -> float:
        return self._delay

    async def acquire(self) -> None:
        if self._delay > 0:
            await self._sleep(self._delay)


class TokenBucketRateLimiter:
    """Classic token bucket: ``rate`` tokens per second, up to ``capacity``."""

    def __init__(
        self,
        rate: float,
        capacity: int = 1,
        *,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = time.monotonic,
    ) -> None:
        if rate <= 0:
            raise ValueError("rate must be > 0")
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._rate = rate
        self._capacity = capacity
        self._sleep = sleep
        self._clock = clock
        self._tokens = float(capacity)
        self._updated = clock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._updated
        self._tokens = min(self._capacity, self._tokens + elapsed * self._rate)
        self._updated = now

    async def acquire(self) -> None:
        self._refill()
        if self._tokens < 1:
            await self._sleep((1 - self._tokens) / self._rate)
            self._refill()
        # Clock may not have advanced under a fake sleep; never go negative.
        self._tokens = max(0.0, self._tokens - 1)
