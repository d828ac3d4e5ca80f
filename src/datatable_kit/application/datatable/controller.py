"""Application datatable – DataTableController.

Composes search, filter, sort and pagination state into one fetch contract:

* every trigger (search settle, applied filters, sort, page, limit, refresh,
  mount, reset) builds a :class:`TableQuery` from the current state and
  dispatches exactly one fetch;
* triggers that invalidate the page offset reset ``page`` to 1 before the
  query is built;
* each fetch carries a monotonically increasing request id and, unless
  ``discard_stale_responses`` is turned off, only the latest issued request
  may update ``data``, ``pagination`` and ``error``.

Mutators are plain methods meant to be called from UI event handlers on the
event loop thread. They return the dispatched :class:`asyncio.Task` (or
``None`` when nothing was dispatched); awaiting it is optional.
"""
from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar

from datatable_kit.application.cache import QueryCache
from datatable_kit.application.datatable.query import Fetcher, TableQuery
from datatable_kit.application.filtering import FilterState
from datatable_kit.application.pagination import PaginatedResponse, PaginationInfo, PaginationState
from datatable_kit.application.search import SearchState
from datatable_kit.application.sorting import SortConfig, SortDirection, SortState
from datatable_kit.application.url_sync import LocationAdapter, TableUrlState, UrlSyncConfig, UrlSynchronizer
from datatable_kit.config import DataTableSettings
from datatable_kit.kernel.errors import BaseError, ControllerClosedError
from datatable_kit.kernel.timers import AsyncioTimerScheduler, TimerScheduler
from datatable_kit.observability.logging import get_logger

T = TypeVar("T")

__all__ = ["DEFAULT_ERROR_MESSAGE", "DataTableController", "FetchStatus", "describe_error"]

DEFAULT_ERROR_MESSAGE = "Failed to fetch data"


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def describe_error(exc: BaseException) -> str:
    """Human-readable message for a failed fetch."""
    if isinstance(exc, BaseError):
        return exc.message or DEFAULT_ERROR_MESSAGE
    return str(exc) or DEFAULT_ERROR_MESSAGE


class DataTableController(Generic[T]):
    """Search + filters + sort + pagination driving one injected fetch function.

    Parameters
    ----------
    fetch:
        ``async (TableQuery) -> PaginatedResponse | {"data": [...], "pagination": {...}}``.
    default_filters:
        The complete filter record with each field's empty value.
    initial_filters:
        Overrides applied on top of the defaults when the view opens.
    initial_sort:
        Sort active before the first user interaction.
    settings:
        Debounce windows, page sizes and stale-response policy.
    scheduler:
        Timer port for the search and URL debouncers.
    location:
        When given, the table state is read from and written to this
        location's query string.
    url_config:
        Param names and sync toggles for the URL projection.
    cache:
        Cache of fetched pages, keyed by the query. When omitted and
        ``settings.cache_enabled`` is set, one is built from the cache settings.
    name:
        Bound on every log event as ``table``.
    """

    def __init__(
        self,
        fetch: Fetcher[T],
        *,
        default_filters: Mapping[str, Any] | None = None,
        initial_filters: Mapping[str, Any] | None = None,
        initial_sort: SortConfig | None = None,
        settings: DataTableSettings | None = None,
        scheduler: TimerScheduler | None = None,
        location: LocationAdapter | None = None,
        url_config: UrlSyncConfig | None = None,
        cache: QueryCache[PaginatedResponse[T]] | None = None,
        name: str = "datatable",
    ) -> None:
        self._fetch = fetch
        self._settings = settings or DataTableSettings()
        self._scheduler = scheduler or AsyncioTimerScheduler()
        self._name = name
        self._log = get_logger(__name__, table=name)

        self._search = SearchState(
            self._scheduler,
            debounce_ms=self._settings.search_debounce_ms,
            min_length=self._settings.search_min_length,
            on_settle=self._on_search_settled,
        )
        self._filters = FilterState(default_filters or {}, initial_filters)
        self._sort = SortState(initial_sort)
        self._pagination = PaginationState(
            self._settings.initial_page,
            self._settings.initial_limit,
            max_limit=self._settings.max_limit,
        )

        self._url: UrlSynchronizer | None = None
        if location is not None:
            self._url = UrlSynchronizer(
                location,
                self._url_defaults(),
                url_config or UrlSyncConfig(debounce_ms=self._settings.url_debounce_ms),
                self._scheduler,
            )
        if cache is None and self._settings.cache_enabled:
            cache = QueryCache(
                ttl_seconds=self._settings.cache_ttl_seconds,
                max_size=self._settings.cache_max_size,
            )
        self._cache = cache

        self._data: list[T] = []
        self._error: str | None = None
        self._status = FetchStatus.IDLE
        self._issued = 0
        self._dispatched_search = ""
        self._tasks: set[asyncio.Task[None]] = set()
        self._started = False
        self._closed = False

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def settings(self) -> DataTableSettings:
        return self._settings

    @property
    def data(self) -> list[T]:
        return list(self._data)

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def loading(self) -> bool:
        return self._status is FetchStatus.LOADING

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def pagination(self) -> PaginationInfo:
        return self._pagination.snapshot()

    @property
    def has_next_page(self) -> bool:
        return self._pagination.has_next_page

    @property
    def has_previous_page(self) -> bool:
        return self._pagination.has_previous_page

    @property
    def filters(self) -> dict[str, Any]:
        return self._filters.current

    @property
    def has_active_filters(self) -> bool:
        return self._filters.has_active

    @property
    def search_query(self) -> str:
        return self._search.raw_query

    @property
    def settled_search(self) -> str:
        return self._search.settled_query

    @property
    def is_searching(self) -> bool:
        return self._search.is_pending

    @property
    def has_search_query(self) -> bool:
        return self._search.has_query

    @property
    def sort_config(self) -> SortConfig | None:
        return self._sort.active

    @property
    def url_sync(self) -> UrlSynchronizer | None:
        return self._url

    @property
    def cache(self) -> QueryCache[PaginatedResponse[T]] | None:
        return self._cache

    @property
    def request_count(self) -> int:
        """Number of fetches dispatched so far."""
        return self._issued

    @property
    def closed(self) -> bool:
        return self._closed

    def get_sort_direction(self, field: str) -> SortDirection | None:
        return self._sort.get_direction(field)

    def current_query(self) -> TableQuery:
        """The combined query the next fetch would send."""
        return TableQuery(
            page=self._pagination.page,
            limit=self._pagination.limit,
            filters=self._filters.current,
            search=self._search.effective_query,
            sort=self._sort.active,
        )

    def url_state(self) -> TableUrlState:
        return TableUrlState(
            page=self._pagination.page,
            limit=self._pagination.limit,
            search=self._search.settled_query,
            filters=self._filters.current,
            sort=self._sort.active,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task[None]:
        """Mount: hydrate from the URL (first call only) and fetch."""
        self._ensure_open()
        if not self._started and self._url is not None:
            self._hydrate_from_url()
        self._started = True
        self._dispatched_search = self._search.effective_query or ""
        return self._dispatch("mount")

    def close(self) -> None:
        """Unmount: cancel debounce timers and outstanding fetches."""
        if self._closed:
            return
        self._closed = True
        self._search.close()
        if self._url is not None:
            self._url.close()
        for task in list(self._tasks):
            task.cancel()
        self._log.debug("datatable.closed", cancelled=len(self._tasks))

    async def wait_idle(self) -> None:
        """Wait until every dispatched fetch has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def __aenter__(self) -> "DataTableController[T]":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()
        await self.wait_idle()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def set_search_query(self, raw: str) -> None:
        self._ensure_open()
        self._search.set_query(raw)

    def clear_search(self) -> asyncio.Task[None] | None:
        self._ensure_open()
        self._search.clear_query()
        if not self._dispatched_search:
            return None
        self._dispatched_search = ""
        self._pagination.reset_page()
        return self._dispatch("search")

    def _on_search_settled(self, value: str) -> None:  # noqa: ARG002
        effective = self._search.effective_query or ""
        if self._closed or effective == self._dispatched_search:
            return
        self._dispatched_search = effective
        self._pagination.reset_page()
        self._dispatch("search")

    # ------------------------------------------------------------------
    # Filters (staged until applied)
    # ------------------------------------------------------------------

    def set_filter(self, key: str, value: Any) -> None:
        self._ensure_open()
        self._filters.set_field(key, value)

    def set_filters(self, partial: Mapping[str, Any]) -> None:
        self._ensure_open()
        self._filters.set_fields(partial)

    def clear_filters(self) -> None:
        self._ensure_open()
        self._filters.clear()

    def reset_filters(self) -> None:
        self._ensure_open()
        self._filters.reset()

    def apply_filters(self, partial: Mapping[str, Any] | None = None) -> asyncio.Task[None]:
        self._ensure_open()
        if partial:
            self._filters.set_fields(partial)
        self._pagination.reset_page()
        return self._dispatch("filters")

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------

    def request_sort(self, field: str) -> asyncio.Task[None]:
        self._ensure_open()
        self._sort.request_sort(field)
        return self._dispatch("sort")

    def clear_sort(self) -> asyncio.Task[None] | None:
        self._ensure_open()
        if self._sort.active is None:
            return None
        self._sort.clear_sort()
        return self._dispatch("sort")

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def go_to_page(self, page: int) -> asyncio.Task[None] | None:
        self._ensure_open()
        if not self._pagination.go_to_page(page):
            self._log.debug("datatable.page_rejected", page=page, total_pages=self._pagination.total_pages)
            return None
        return self._dispatch("page")

    def next_page(self) -> asyncio.Task[None] | None:
        return self.go_to_page(self._pagination.page + 1)

    def previous_page(self) -> asyncio.Task[None] | None:
        return self.go_to_page(self._pagination.page - 1)

    def change_limit(self, limit: int) -> asyncio.Task[None]:
        self._ensure_open()
        self._pagination.change_limit(limit)
        return self._dispatch("limit")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def refresh(self) -> asyncio.Task[None]:
        """Re-fetch the current query, bypassing the cache."""
        self._ensure_open()
        return self._dispatch("refresh", use_cache=False)

    def reset(self) -> asyncio.Task[None]:
        """Back to construction-time defaults, then exactly one fetch."""
        self._ensure_open()
        self._filters.clear()
        self._search.clear_query()
        self._dispatched_search = ""
        self._sort.clear_sort()
        self._pagination.seed(page=self._settings.initial_page, limit=self._settings.initial_limit)
        return self._dispatch("reset")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._closed:
            raise ControllerClosedError(self._name)

    def _url_defaults(self) -> TableUrlState:
        # The opening state; hydration merges the URL over the same baseline.
        return TableUrlState(
            page=self._settings.initial_page,
            limit=self._settings.initial_limit,
            search="",
            filters=self._filters.initial,
            sort=self._sort.active,
        )

    def _hydrate_from_url(self) -> None:
        assert self._url is not None
        overrides = self._url.initial_overrides()
        if overrides.is_empty:
            return
        self._pagination.seed(overrides.page, overrides.limit)
        if overrides.search is not None:
            self._search.seed(overrides.search)
        if overrides.filters:
            self._filters.set_fields(overrides.filters)
        if overrides.sort is not None or overrides.sort_cleared:
            self._sort.set(overrides.sort)
        self._log.debug("datatable.hydrated_from_url", query=self.current_query().to_params())

    def _dispatch(self, reason: str, *, use_cache: bool = True) -> asyncio.Task[None]:
        query = self.current_query()
        self._issued += 1
        request_id = self._issued
        self._status = FetchStatus.LOADING
        self._error = None
        if self._url is not None:
            self._url.schedule(self.url_state())
        self._log.debug("datatable.fetch_started", request_id=request_id, reason=reason, query=query.to_params())

        task = asyncio.get_running_loop().create_task(self._run_fetch(request_id, query, use_cache))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_fetch(self, request_id: int, query: TableQuery, use_cache: bool) -> None:
        key = query.cache_key() if self._cache is not None else None
        response: PaginatedResponse[Any] | None = None
        if key is not None and use_cache:
            response = self._cache.get(key)  # type: ignore[union-attr]
            if response is not None:
                self._log.debug("datatable.cache_hit", request_id=request_id)
        try:
            if response is None:
                response = PaginatedResponse.coerce(await self._fetch(query))
                if key is not None:
                    self._cache.set(key, response)  # type: ignore[union-attr]
        except Exception as exc:  # noqa: BLE001 – surfaced through ``error``
            self._on_failure(request_id, exc)
        else:
            self._on_success(request_id, response)

    def _is_latest(self, request_id: int) -> bool:
        if not self._settings.discard_stale_responses or request_id == self._issued:
            return True
        self._log.info("datatable.stale_response_discarded", request_id=request_id, latest_request_id=self._issued)
        return False

    def _on_success(self, request_id: int, response: PaginatedResponse[Any]) -> None:
        if not self._is_latest(request_id):
            return
        self._data = list(response.data)
        self._pagination.apply(response.pagination)
        self._error = None
        self._status = FetchStatus.SUCCESS
        self._log.debug(
            "datatable.fetch_succeeded",
            request_id=request_id,
            rows=len(self._data),
            page=response.pagination.page,
            total=response.pagination.total,
        )

    def _on_failure(self, request_id: int, exc: Exception) -> None:
        if not self._is_latest(request_id):
            return
        self._data = []
        self._error = describe_error(exc)
        self._status = FetchStatus.ERROR
        self._log.error(
            "datatable.fetch_failed",
            request_id=request_id,
            error=self._error,
            error_type=type(exc).__name__,
        )
