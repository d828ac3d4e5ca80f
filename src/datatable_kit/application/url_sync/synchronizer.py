"""Application URL sync – UrlSynchronizer (debounced location writes)."""
from __future__ import annotations

from datatable_kit.application.url_sync.codec import (
    TableUrlState,
    UrlStateOverrides,
    UrlSyncConfig,
    parse_overrides,
    serialize,
)
from datatable_kit.application.url_sync.location import LocationAdapter
from datatable_kit.kernel.timers import AsyncioTimerScheduler, Debouncer, TimerScheduler
from datatable_kit.observability.logging import get_logger

__all__ = ["UrlSynchronizer"]

_log = get_logger(__name__)


class UrlSynchronizer:
    """Two-way bridge between table state and a :class:`LocationAdapter`.

    Reads happen once, when the table mounts. Writes are debounced so a burst
    of state changes produces a single ``replace``, and are skipped when the
    serialised query equals what the location already holds.
    """

    def __init__(
        self,
        location: LocationAdapter,
        defaults: TableUrlState,
        config: UrlSyncConfig | None = None,
        scheduler: TimerScheduler | None = None,
    ) -> None:
        self._location = location
        self._defaults = defaults
        self._config = config or UrlSyncConfig()
        self._debouncer = Debouncer(scheduler or AsyncioTimerScheduler(), self._config.debounce_ms)
        self._pending: TableUrlState | None = None

    @property
    def defaults(self) -> TableUrlState:
        return self._defaults

    @property
    def config(self) -> UrlSyncConfig:
        return self._config

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def initial_overrides(self) -> UrlStateOverrides:
        return parse_overrides(self._location.read(), self._defaults, self._config)

    def schedule(self, state: TableUrlState) -> None:
        self._pending = state
        self._debouncer.arm(self._write_pending)

    def flush(self) -> bool:
        return self._debouncer.flush()

    def write(self, state: TableUrlState) -> bool:
        """Replace the location now. Returns ``False`` when nothing changed."""
        current = self._location.read()
        query = serialize(state, self._defaults, self._config, base_query=current)
        if query == current:
            return False
        self._location.replace(query)
        _log.debug("url_sync.replaced", query=query)
        return True

    def close(self) -> None:
        self._debouncer.cancel()
        self._pending = None

    def _write_pending(self) -> None:
        state, self._pending = self._pending, None
        if state is not None:
            self.write(state)
