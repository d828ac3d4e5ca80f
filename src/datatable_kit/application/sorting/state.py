"""Application sorting – SortDirection, SortConfig, SortState."""
from __future__ import annotations

import dataclasses
from enum import Enum

__all__ = ["SortConfig", "SortDirection", "SortState"]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class SortConfig:
    """The single active sort criterion."""
    key: str
    direction: SortDirection = SortDirection.ASC

    def to_params(self) -> dict[str, str]:
        return {"key": self.key, "direction": self.direction.value}


class SortState:
    """At most one sorted column.

    Requesting the active column flips its direction; requesting any other
    column replaces the sort with that column ascending. Only
    :meth:`clear_sort` returns to "no sort".
    """

    def __init__(self, initial: SortConfig | None = None) -> None:
        self._active = initial

    @property
    def active(self) -> SortConfig | None:
        return self._active

    def request_sort(self, field: str) -> SortConfig:
        if self._active is not None and self._active.key == field:
            self._active = SortConfig(field, self._active.direction.flipped())
        else:
            self._active = SortConfig(field, SortDirection.ASC)
        return self._active

    def clear_sort(self) -> None:
        self._active = None

    def set(self, config: SortConfig | None) -> None:
        self._active = config

    def get_direction(self, field: str) -> SortDirection | None:
        if self._active is not None and self._active.key == field:
            return self._active.direction
        return None
