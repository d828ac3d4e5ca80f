"""Kernel timers – asyncio-backed TimerScheduler."""
from __future__ import annotations

import asyncio
from typing import Callable

from datatable_kit.kernel.timers.ports import TimerHandle


class AsyncioTimerScheduler:
    """Production scheduler that delegates to ``loop.call_later``.

    When no loop is given the running loop is looked up on every call, so a
    single instance can be created before the loop starts.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay), callback)


__all__ = ["AsyncioTimerScheduler"]
