"""Application sorting – comparator for locally held rows."""
from __future__ import annotations

import functools
import locale
from datetime import date, datetime
from typing import Any, Callable, Iterable, Mapping, TypeVar

from datatable_kit.application.sorting.state import SortConfig, SortDirection

__all__ = ["compare_values", "sort_rows"]

T = TypeVar("T")


def _epoch_ms(value: date) -> float:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.timestamp() * 1000


def _sign(delta: float) -> int:
    return (delta > 0) - (delta < 0)


def compare_values(a: Any, b: Any, direction: SortDirection = SortDirection.ASC) -> int:
    """Three-way comparison of two cell values.

    ``None`` sorts lowest when ascending. Numbers compare numerically,
    dates by epoch milliseconds, strings with the current locale's collation,
    booleans as ``False < True``; anything else falls back to comparing the
    string forms.
    """
    if a is None and b is None:
        result = 0
    elif a is None:
        result = -1
    elif b is None:
        result = 1
    elif isinstance(a, bool) and isinstance(b, bool):
        result = int(a) - int(b)
    elif (
        isinstance(a, (int, float)) and isinstance(b, (int, float))
        and not isinstance(a, bool) and not isinstance(b, bool)
    ):
        result = _sign(a - b)
    elif isinstance(a, date) and isinstance(b, date):
        result = _sign(_epoch_ms(a) - _epoch_ms(b))
    elif isinstance(a, str) and isinstance(b, str):
        result = _sign(locale.strcoll(a, b))
    else:
        result = _sign(locale.strcoll(str(a), str(b)))
    return result if direction is SortDirection.ASC else -result


def _default_key_fn(row: Any) -> Mapping[str, Any]:
    return row if isinstance(row, Mapping) else vars(row)


def sort_rows(
    rows: Iterable[T],
    sort: SortConfig | None,
    key_fn: Callable[[T], Mapping[str, Any]] | None = None,
) -> list[T]:
    """Return *rows* ordered by *sort*; a new list, input untouched.

    Missing keys count as ``None``. The sort is stable.
    """
    items = list(rows)
    if sort is None:
        return items
    extract = key_fn or _default_key_fn

    def _cmp(left: T, right: T) -> int:
        return compare_values(extract(left).get(sort.key), extract(right).get(sort.key), sort.direction)

    return sorted(items, key=functools.cmp_to_key(_cmp))
