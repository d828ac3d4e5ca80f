"""Application pagination – PaginationState."""
from __future__ import annotations

from datatable_kit.application.pagination.envelope import PaginationInfo

__all__ = ["PaginationState"]


class PaginationState:
    """Current page window plus the server-reported totals.

    ``total`` and ``total_pages`` are only ever written from a server
    envelope through :meth:`apply`; they are never derived locally.
    """

    def __init__(self, page: int = 1, limit: int = 10, *, max_limit: int = 100) -> None:
        if max_limit < 1:
            raise ValueError("max_limit must be >= 1")
        if page < 1:
            raise ValueError("page must be >= 1")
        self._max_limit = max_limit
        self._page = page
        self._limit = self._clamp(limit)
        self._total = 0
        self._total_pages = 0

    @property
    def page(self) -> int:
        return self._page

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def total(self) -> int:
        return self._total

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def max_limit(self) -> int:
        return self._max_limit

    @property
    def has_next_page(self) -> bool:
        return self._page < self._total_pages

    @property
    def has_previous_page(self) -> bool:
        return self._page > 1

    def go_to_page(self, page: int) -> bool:
        """Move to *page* when it is within ``1..total_pages``.

        Out-of-range requests are ignored, never clamped; the return value
        says whether the move happened.
        """
        if page < 1 or page > self._total_pages:
            return False
        self._page = page
        return True

    def change_limit(self, limit: int) -> int:
        """Set a new page size and go back to page 1 in one step."""
        self._page, self._limit = 1, self._clamp(limit)
        return self._limit

    def reset_page(self) -> None:
        self._page = 1

    def seed(self, page: int | None = None, limit: int | None = None) -> None:
        """Position the window before the first fetch (URL hydration)."""
        if page is not None and page >= 1:
            self._page = page
        if limit is not None:
            self._limit = self._clamp(limit)

    def apply(self, info: PaginationInfo) -> None:
        self._page = max(1, info.page)
        self._limit = max(1, info.limit)
        self._total = max(0, info.total)
        self._total_pages = max(0, info.total_pages)

    def snapshot(self) -> PaginationInfo:
        return PaginationInfo(page=self._page, limit=self._limit, total=self._total, total_pages=self._total_pages)

    def _clamp(self, limit: int) -> int:
        return min(max(1, limit), self._max_limit)
