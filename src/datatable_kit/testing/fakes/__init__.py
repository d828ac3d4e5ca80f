"""Testing fakes – in-memory doubles for the timer and fetch ports."""
from datatable_kit.testing.fakes.fetcher import ScriptedFetcher
from datatable_kit.testing.fakes.scheduler import ManualTimerHandle, ManualTimerScheduler

__all__ = ["ManualTimerHandle", "ManualTimerScheduler", "ScriptedFetcher"]
