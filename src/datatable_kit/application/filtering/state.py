"""Application filtering – FilterState over a caller-defined record."""
from __future__ import annotations

from typing import Any, Mapping

from datatable_kit.kernel.errors import UnknownFilterFieldError

__all__ = ["FilterState", "is_sequence_value", "is_value_active"]


def is_sequence_value(value: Any) -> bool:
    """Multi-select filter values: lists, tuples, sets and frozensets."""
    return isinstance(value, (list, tuple, set, frozenset))


def is_value_active(value: Any, default: Any) -> bool:
    """Whether *value* narrows the result set compared to *default*.

    Sequences are active when non-empty, strings when non-blank; in every
    case the value must also differ from the default.
    """
    if is_sequence_value(value):
        if is_sequence_value(default):
            return len(value) > 0 and list(value) != list(default)
        return len(value) > 0
    if isinstance(value, str):
        return value.strip() != "" and value != default
    return value != default


class FilterState:
    """Always fully populated filter record.

    ``defaults`` fixes the set of fields and their empty sentinels. ``initial``
    overrides some of them for the view's opening state; :meth:`reset` goes
    back to it, :meth:`clear` goes back to the bare defaults.
    """

    def __init__(self, defaults: Mapping[str, Any], initial: Mapping[str, Any] | None = None) -> None:
        self._defaults = dict(defaults)
        self._initial = dict(initial or {})
        self._check_keys(self._initial)
        self._current = {**self._defaults, **self._initial}

    @property
    def defaults(self) -> dict[str, Any]:
        return dict(self._defaults)

    @property
    def initial(self) -> dict[str, Any]:
        """The opening record: defaults with the initial overrides applied."""
        return {**self._defaults, **self._initial}

    @property
    def current(self) -> dict[str, Any]:
        return dict(self._current)

    @property
    def has_active(self) -> bool:
        return any(self.is_field_active(key) for key in self._current)

    def is_field_active(self, key: str) -> bool:
        self._check_keys((key,))
        return is_value_active(self._current[key], self._defaults[key])

    def active_fields(self) -> dict[str, Any]:
        return {key: value for key, value in self._current.items() if self.is_field_active(key)}

    def set_field(self, key: str, value: Any) -> None:
        self._check_keys((key,))
        self._current = {**self._current, key: value}

    def set_fields(self, partial: Mapping[str, Any]) -> None:
        self._check_keys(partial)
        self._current = {**self._current, **partial}

    def clear(self) -> None:
        self._current = dict(self._defaults)

    def reset(self) -> None:
        self._current = self.initial

    def _check_keys(self, keys: Any) -> None:
        unknown = [key for key in keys if key not in self._defaults]
        if unknown:
            raise UnknownFilterFieldError([str(key) for key in unknown])
