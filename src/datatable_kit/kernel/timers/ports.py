"""Kernel timers – TimerScheduler and TimerHandle ports."""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...
    def cancelled(self) -> bool: ...


@runtime_checkable
class TimerScheduler(Protocol):
    """Port: run a callback once after *delay* seconds.

    Implementations must invoke callbacks on the same thread (and event loop)
    that owns the table state.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


__all__ = ["TimerHandle", "TimerScheduler"]
