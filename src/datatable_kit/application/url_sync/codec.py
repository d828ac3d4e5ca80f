"""Application URL sync – query-string codec for table state."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Mapping
from urllib.parse import parse_qsl, urlencode

from datatable_kit.application.filtering import is_sequence_value
from datatable_kit.application.sorting import SortConfig, SortDirection
from datatable_kit.observability.logging import get_logger

__all__ = [
    "TableUrlState",
    "UrlStateOverrides",
    "UrlSyncConfig",
    "deserialize",
    "parse_overrides",
    "serialize",
]

_log = get_logger(__name__)
_INVALID = object()


@dataclasses.dataclass(frozen=True)
class UrlSyncConfig:
    """Which parts of the table state live in the URL, and under which names."""

    sync_pagination: bool = True
    sync_filters: bool = True
    sync_search: bool = True
    sync_sort: bool = True
    page_param: str = "page"
    limit_param: str = "limit"
    search_param: str = "search"
    sort_key_param: str = "sortKey"
    sort_dir_param: str = "sortDir"
    filter_params: Mapping[str, str] = dataclasses.field(default_factory=dict)
    #: Scalar type (``int``, ``float``, ``bool`` or ``str``) used to decode a
    #: filter; fields missing here decode like their default value.
    filter_types: Mapping[str, type] = dataclasses.field(default_factory=dict)
    sortable_fields: frozenset[str] | None = None
    debounce_ms: int = 300

    def filter_param(self, field: str) -> str:
        return self.filter_params.get(field, field)

    def filter_sample(self, field: str, default: Any) -> Any:
        """A value whose type decides how *field* is parsed from the URL."""
        kind = self.filter_types.get(field)
        if kind is None:
            return next(iter(default), "") if is_sequence_value(default) else default
        return kind()


@dataclasses.dataclass(frozen=True)
class TableUrlState:
    """The URL-relevant projection of a table: one value per concern."""

    page: int = 1
    limit: int = 10
    search: str = ""
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    sort: SortConfig | None = None


@dataclasses.dataclass(frozen=True)
class UrlStateOverrides:
    """Values actually present (and valid) in a query string; ``None`` means absent.

    ``sort_cleared`` records an explicit "no sort" marker, which overrides a
    default sort.
    """

    page: int | None = None
    limit: int | None = None
    search: str | None = None
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    sort: SortConfig | None = None
    sort_cleared: bool = False

    @property
    def is_empty(self) -> bool:
        return (
            self.page is None and self.limit is None and self.search is None
            and not self.filters and self.sort is None and not self.sort_cleared
        )

    def merged_over(self, defaults: TableUrlState) -> TableUrlState:
        if self.sort is not None:
            sort = self.sort
        else:
            sort = None if self.sort_cleared else defaults.sort
        return TableUrlState(
            page=self.page if self.page is not None else defaults.page,
            limit=self.limit if self.limit is not None else defaults.limit,
            search=self.search if self.search is not None else defaults.search,
            filters={**defaults.filters, **self.filters},
            sort=sort,
        )


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if is_sequence_value(value):
        return len(value) == 0
    return isinstance(value, str) and not value.strip()


def _encode_value(value: Any) -> str | None:
    if _is_blank(value):
        return None
    if is_sequence_value(value):
        return ",".join(_encode_scalar(item) for item in value)
    return _encode_scalar(value)


def _encode_filter(value: Any, default: Any) -> str | None:
    """String form of a filter value, or ``None`` when it should be omitted.

    A blank value over a non-blank default encodes as the empty string, so
    clearing a pre-set filter survives a reload.
    """
    encoded = _encode_value(value)
    if encoded == _encode_value(default):
        return None
    return "" if encoded is None else encoded


def serialize(
    state: TableUrlState,
    defaults: TableUrlState,
    config: UrlSyncConfig | None = None,
    base_query: str = "",
) -> str:
    """Render *state* as a query string, omitting every default value.

    Params in *base_query* that the table does not own are kept in place,
    repeated ones included.
    """
    config = config or UrlSyncConfig()
    pairs = parse_qsl(base_query.lstrip("?"), keep_blank_values=True)

    def put(name: str, value: str | None) -> None:
        nonlocal pairs
        position = next((i for i, (key, _) in enumerate(pairs) if key == name), len(pairs))
        pairs = [(key, raw) for key, raw in pairs if key != name]
        if value is not None:
            pairs.insert(position, (name, value))

    if config.sync_pagination:
        put(config.page_param, str(state.page) if state.page != defaults.page else None)
        put(config.limit_param, str(state.limit) if state.limit != defaults.limit else None)

    if config.sync_search:
        put(config.search_param, state.search if state.search.strip() else None)

    if config.sync_filters:
        for field, value in state.filters.items():
            put(config.filter_param(field), _encode_filter(value, defaults.filters.get(field)))

    if config.sync_sort:
        if state.sort is not None and state.sort != defaults.sort:
            put(config.sort_key_param, state.sort.key)
            put(config.sort_dir_param, state.sort.direction.value)
        elif state.sort is None and defaults.sort is not None:
            put(config.sort_key_param, "")
            put(config.sort_dir_param, None)
        else:
            put(config.sort_key_param, None)
            put(config.sort_dir_param, None)

    return urlencode(pairs, safe=",")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _first_values(query: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for name, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        params.setdefault(name, value)
    return params


def _positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _decode_scalar(raw: str, sample: Any) -> Any:
    if isinstance(sample, bool):
        if raw == "true":
            return True
        if raw == "false":
            return False
        return _INVALID
    if isinstance(sample, int):
        try:
            return int(raw)
        except ValueError:
            return _INVALID
    if isinstance(sample, float):
        try:
            value = float(raw)
        except ValueError:
            return _INVALID
        return value if math.isfinite(value) else _INVALID
    return raw


def _cleared(default: Any) -> Any:
    if is_sequence_value(default):
        return () if isinstance(default, tuple) else []
    return "" if isinstance(default, str) else None


def _decode_filter(raw: str, default: Any, sample: Any) -> Any:
    if is_sequence_value(default):
        items = [_decode_scalar(token, sample) for token in raw.split(",")]
        if any(item is _INVALID for item in items):
            return _INVALID
        return tuple(items) if isinstance(default, tuple) else items
    return _decode_scalar(raw, sample)


def parse_overrides(
    query: str,
    defaults: TableUrlState,
    config: UrlSyncConfig | None = None,
) -> UrlStateOverrides:
    """Read the table-owned params of *query*.

    Unknown params are ignored and malformed values are dropped silently, so
    the corresponding default stays in effect. An empty filter param clears a
    non-blank default; an empty sort key clears a default sort.
    """
    config = config or UrlSyncConfig()
    params = _first_values(query)
    page = limit = None
    search = None
    filters: dict[str, Any] = {}
    sort = None
    sort_cleared = False

    if config.sync_pagination:
        page = _positive_int(params.get(config.page_param))
        limit = _positive_int(params.get(config.limit_param))

    if config.sync_search:
        search = params.get(config.search_param) or None

    if config.sync_filters:
        for field, default in defaults.filters.items():
            raw = params.get(config.filter_param(field))
            if raw is None:
                continue
            if raw == "":
                if not _is_blank(default):
                    filters[field] = _cleared(default)
                continue
            value = _decode_filter(raw, default, config.filter_sample(field, default))
            if value is _INVALID:
                _log.debug("url_sync.filter_ignored", field=field, raw=raw)
                continue
            filters[field] = value

    if config.sync_sort:
        key = params.get(config.sort_key_param)
        direction = params.get(config.sort_dir_param)
        allowed = config.sortable_fields is None or key in config.sortable_fields
        if key == "" and not direction:
            sort_cleared = True
        elif key and allowed and direction in (SortDirection.ASC.value, SortDirection.DESC.value):
            sort = SortConfig(key, SortDirection(direction))
        elif key or direction:
            _log.debug("url_sync.sort_ignored", key=key, direction=direction)

    return UrlStateOverrides(
        page=page,
        limit=limit,
        search=search,
        filters=filters,
        sort=sort,
        sort_cleared=sort_cleared,
    )


def deserialize(
    query: str,
    defaults: TableUrlState,
    config: UrlSyncConfig | None = None,
) -> TableUrlState:
    """Full table state for *query*: the parsed overrides merged over *defaults*."""
    return parse_overrides(query, defaults, config).merged_over(defaults)
