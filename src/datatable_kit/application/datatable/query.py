"""Application datatable – TableQuery (the combined query) and Fetcher type."""
from __future__ import annotations

import dataclasses
import json
from datetime import date
from typing import Any, Awaitable, Callable, Mapping, TypeVar, Union

from datatable_kit.application.pagination import PaginatedResponse
from datatable_kit.application.sorting import SortConfig

T = TypeVar("T")

__all__ = ["Fetcher", "TableQuery"]


@dataclasses.dataclass(frozen=True)
class TableQuery:
    """Parameters handed to the injected fetch function.

    ``search`` and ``sort`` are ``None`` when inactive and are left out of
    :meth:`to_params` rather than sent as empty values.
    """

    page: int
    limit: int
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    search: str | None = None
    sort: SortConfig | None = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"page": self.page, "limit": self.limit, "filters": dict(self.filters)}
        if self.search is not None:
            params["search"] = self.search
        if self.sort is not None:
            params["sort"] = self.sort.to_params()
        return params

    def cache_key(self) -> str:
        """Stable string identity, equal for queries with equal parameters."""
        return json.dumps(self.to_params(), sort_keys=True, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(map(str, value))
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


Fetcher = Callable[[TableQuery], Awaitable[Union[PaginatedResponse[T], Mapping[str, Any]]]]
