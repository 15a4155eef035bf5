"""Stopwatch - monotonic millisecond clock and sleep for tween sessions."""
from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable

_NS_PER_MS = 1_000_000


class Stopwatch:
    """Measures whole milliseconds since the last restart.

    The time source returns integer nanoseconds (like time.monotonic_ns) and
    the sleep functions take seconds (like time.sleep). Both are injectable
    so sessions can run against a fake clock.
    """

    def __init__(
        self,
        now_ns: Callable[[], int] = time.monotonic_ns,
        sleep: Callable[[float], None] = time.sleep,
        async_sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._now_ns = now_ns
        self._sleep = sleep
        self._async_sleep = async_sleep
        self._start_ns = now_ns()

    @property
    def start_ns(self) -> int:
        return self._start_ns

    def restart(self) -> None:
        self._start_ns = self._now_ns()

    def elapsed_ms(self) -> int:
        return (self._now_ns() - self._start_ns) // _NS_PER_MS

    def sleep_ms(self, ms: int) -> None:
        if ms > 0:
            self._sleep(ms / 1000)

    async def sleep_ms_async(self, ms: int) -> None:
        if ms > 0:
            await self._async_sleep(ms / 1000)
