"""Kernel timers – cancellable scheduled callbacks and debouncing."""
from datatable_kit.kernel.timers.asyncio_scheduler import AsyncioTimerScheduler
from datatable_kit.kernel.timers.debouncer import Debouncer
from datatable_kit.kernel.timers.ports import TimerHandle, TimerScheduler

__all__ = ["AsyncioTimerScheduler", "Debouncer", "TimerHandle", "TimerScheduler"]
