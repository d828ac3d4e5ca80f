"""Config settings – DataTableSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from datatable_kit.config.settings.base import Settings
from datatable_kit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class DataTableSettings(Settings):
    """Tunables shared by every data table controller.

    Environment variables use the ``DATATABLE_`` prefix, e.g.
    ``DATATABLE_INITIAL_LIMIT=25``.
    """

    _prefix: ClassVar[str] = "DATATABLE"

    search_debounce_ms: int = 300
    search_min_length: int = 1
    initial_page: int = 1
    initial_limit: int = 10
    max_limit: int = 100
    url_debounce_ms: int = 300
    discard_stale_responses: bool = True
    #: Build a QueryCache from the two cache settings below when the caller
    #: does not pass one.
    cache_enabled: bool = False
    cache_ttl_seconds: float = 300.0
    cache_max_size: int = 100

    def _validate(self) -> None:
        if self.search_debounce_ms < 0:
            raise InvalidSettingValueError("search_debounce_ms", self.search_debounce_ms, "must be >= 0")
        if self.search_min_length < 0:
            raise InvalidSettingValueError("search_min_length", self.search_min_length, "must be >= 0")
        if self.initial_page < 1:
            raise InvalidSettingValueError("initial_page", self.initial_page, "must be >= 1")
        if self.max_limit < 1:
            raise InvalidSettingValueError("max_limit", self.max_limit, "must be >= 1")
        if not 1 <= self.initial_limit <= self.max_limit:
            raise InvalidSettingValueError(
                "initial_limit", self.initial_limit, f"must be between 1 and {self.max_limit}"
            )
        if self.url_debounce_ms < 0:
            raise InvalidSettingValueError("url_debounce_ms", self.url_debounce_ms, "must be >= 0")
        if self.cache_ttl_seconds <= 0:
            raise InvalidSettingValueError("cache_ttl_seconds", self.cache_ttl_seconds, "must be > 0")
        if self.cache_max_size < 1:
            raise InvalidSettingValueError("cache_max_size", self.cache_max_size, "must be >= 1")


__all__ = ["DataTableSettings"]
