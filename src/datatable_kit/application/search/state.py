"""Application search – SearchState with debounced settling."""
from __future__ import annotations

from typing import Callable

from datatable_kit.kernel.timers import Debouncer, TimerScheduler

__all__ = ["SearchState"]


class SearchState:
    """Raw and settled free-text query.

    ``raw_query`` follows every keystroke; ``settled_query`` only takes a value
    once ``raw_query`` has held it for ``debounce_ms`` without further input.
    ``on_settle`` is invoked with the settled value each time the debounce
    timer fires.
    """

    def __init__(
        self,
        scheduler: TimerScheduler,
        *,
        debounce_ms: int = 300,
        min_length: int = 1,
        on_settle: Callable[[str], None] | None = None,
    ) -> None:
        if min_length < 0:
            raise ValueError("min_length must be >= 0")
        self._debouncer = Debouncer(scheduler, debounce_ms)
        self._min_length = min_length
        self._on_settle = on_settle
        self._raw = ""
        self._settled = ""

    @property
    def raw_query(self) -> str:
        return self._raw

    @property
    def settled_query(self) -> str:
        return self._settled

    @property
    def is_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def has_query(self) -> bool:
        return len(self._settled) >= self._min_length

    @property
    def effective_query(self) -> str | None:
        """The settled query as sent to a data source, or ``None`` when too short."""
        if not self._settled or not self.has_query:
            return None
        return self._settled

    def set_query(self, raw: str) -> None:
        self._raw = raw
        self._debouncer.arm(self._settle)

    def clear_query(self) -> None:
        self._debouncer.cancel()
        self._raw = ""
        self._settled = ""

    def seed(self, value: str) -> None:
        """Set both values at once, without a debounce window (URL hydration)."""
        self._debouncer.cancel()
        self._raw = value
        self._settled = value

    def close(self) -> None:
        self._debouncer.cancel()

    def _settle(self) -> None:
        self._settled = self._raw
        if self._on_settle is not None:
            self._on_settle(self._settled)
