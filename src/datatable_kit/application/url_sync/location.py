"""Application URL sync – LocationAdapter port and in-memory implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["InMemoryLocation", "LocationAdapter"]


@runtime_checkable
class LocationAdapter(Protocol):
    """Port: the address bar's query string (without the leading ``?``).

    ``replace`` must swap the current entry in place, never push a new
    history entry and never trigger navigation.
    """

    def read(self) -> str: ...
    def replace(self, query: str) -> None: ...


class InMemoryLocation:
    """Location kept in memory; every replacement is recorded in ``history``."""

    def __init__(self, query: str = "") -> None:
        self._query = query.lstrip("?")
        self.history: list[str] = []

    def read(self) -> str:
        return self._query

    def replace(self, query: str) -> None:
        self._query = query.lstrip("?")
        self.history.append(self._query)

    @property
    def replace_count(self) -> int:
        return len(self.history)
