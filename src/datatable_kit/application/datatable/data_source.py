"""Application datatable – InMemoryDataSource implementing the fetch contract."""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from datatable_kit.application.datatable.query import TableQuery
from datatable_kit.application.filtering import is_sequence_value, is_value_active
from datatable_kit.application.pagination import PaginatedResponse
from datatable_kit.application.sorting import sort_rows

T = TypeVar("T")

__all__ = ["InMemoryDataSource"]


class InMemoryDataSource(Generic[T]):
    """Serve table pages from a list of dict-like rows.

    Usable directly as the controller's fetch function. Filters whose value
    is inactive relative to ``filter_defaults`` are skipped; sequence filters
    match by membership, scalar filters by equality.
    """

    def __init__(
        self,
        rows: Iterable[T],
        *,
        search_fields: Sequence[str] | None = None,
        filter_defaults: Mapping[str, Any] | None = None,
        key_fn: Callable[[T], Mapping[str, Any]] | None = None,
    ) -> None:
        self._rows = list(rows)
        self._search_fields = list(search_fields) if search_fields else None
        self._filter_defaults = dict(filter_defaults or {})
        self._key_fn: Callable[[T], Mapping[str, Any]] = key_fn or (
            lambda row: row if isinstance(row, Mapping) else vars(row)
        )

    def replace_rows(self, rows: Iterable[T]) -> None:
        self._rows = list(rows)

    async def __call__(self, query: TableQuery) -> PaginatedResponse[T]:
        return self.query(query)

    def query(self, query: TableQuery) -> PaginatedResponse[T]:
        matched = [row for row in self._rows if self._matches(self._key_fn(row), query)]
        ordered = sort_rows(matched, query.sort, self._key_fn)
        return PaginatedResponse.of(ordered, query.page, query.limit)

    def _matches(self, record: Mapping[str, Any], query: TableQuery) -> bool:
        if query.search:
            needle = query.search.lower()
            fields = self._search_fields or list(record)
            if not any(needle in str(record.get(f, "")).lower() for f in fields):
                return False
        for field, expected in query.filters.items():
            if not is_value_active(expected, self._filter_defaults.get(field)):
                continue
            actual = record.get(field)
            if is_sequence_value(expected):
                if is_sequence_value(actual):
                    if not set(map(str, actual)) & set(map(str, expected)):
                        return False
                elif str(actual) not in set(map(str, expected)):
                    return False
            elif actual != expected:
                return False
        return True
