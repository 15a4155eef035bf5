"""Shared fixtures: a deterministic clock for driving tweens."""
from __future__ import annotations

import pytest
from timed_tween import Stopwatch

_NS_PER_MS = 1_000_000


class FakeClock:
    """Time only moves on sleep() or advance().

    `oversleep` adds extra milliseconds to every sleep, like a coarse OS
    scheduler would.
    """

    def __init__(self, oversleep: int = 0) -> None:
        self.now = 0
        self.oversleep = oversleep
        self.sleeps: list[int] = []

    def now_ns(self) -> int:
        return self.now

    def ms(self) -> int:
        return self.now // _NS_PER_MS

    def advance(self, ms: int) -> None:
        self.now += ms * _NS_PER_MS

    def sleep(self, seconds: float) -> None:
        ms = round(seconds * 1000)
        self.sleeps.append(ms)
        self.advance(ms + self.oversleep)

    async def async_sleep(self, seconds: float) -> None:
        self.sleep(seconds)

    def stopwatch(self) -> Stopwatch:
        return Stopwatch(now_ns=self.now_ns, sleep=self.sleep, async_sleep=self.async_sleep)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
