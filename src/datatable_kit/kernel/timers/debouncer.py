"""Kernel timers – Debouncer (arm / cancel / fire)."""
from __future__ import annotations

from typing import Callable

from datatable_kit.kernel.timers.ports import TimerHandle, TimerScheduler


class Debouncer:
    """Collapse bursts of :meth:`arm` calls into a single callback.

    Every :meth:`arm` cancels the previously armed callback, so only the last
    one fires, ``delay_ms`` after the last call.

    Example::

        debouncer = Debouncer(AsyncioTimerScheduler(), delay_ms=300)
        debouncer.arm(lambda: print("settled"))
        debouncer.arm(lambda: print("settled again"))  # only this one fires
    """

    def __init__(self, scheduler: TimerScheduler, delay_ms: int = 300) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._handle: TimerHandle | None = None
        self._callback: Callable[[], None] | None = None

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arm(self, callback: Callable[[], None]) -> None:
        """(Re)start the quiet period; *callback* replaces any armed one."""
        self.cancel()
        self._callback = callback
        self._handle = self._scheduler.call_later(self._delay_ms / 1000, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._callback = None

    def flush(self) -> bool:
        """Fire the armed callback now. Returns ``False`` when nothing was armed."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def _fire(self) -> None:
        callback = self._callback
        self._handle = None
        self._callback = None
        if callback is not None:
            callback()


__all__ = ["Debouncer"]
