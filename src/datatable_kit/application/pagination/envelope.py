"""Application pagination – PaginationInfo and PaginatedResponse envelope."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Generic, Mapping, Sequence, TypeVar

from datatable_kit.kernel.errors import InvalidEnvelopeError

T = TypeVar("T")

__all__ = ["PaginatedResponse", "PaginationInfo"]


@dataclasses.dataclass(frozen=True)
class PaginationInfo:
    """Server-reported pagination block; ``total_pages`` is authoritative."""
    page: int
    limit: int
    total: int = 0
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PaginationInfo":
        """Read a ``{page, limit, total, totalPages}`` mapping.

        ``total_pages`` is accepted as an alias of ``totalPages``.
        """
        try:
            total_pages = payload["totalPages"] if "totalPages" in payload else payload["total_pages"]
            return cls(
                page=int(payload["page"]),
                limit=int(payload["limit"]),
                total=int(payload["total"]),
                total_pages=int(total_pages),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidEnvelopeError(
                f"Malformed pagination block: {exc}", payload_type=type(payload).__name__, cause=exc
            ) from exc

    def to_dict(self) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit, "total": self.total, "totalPages": self.total_pages}


@dataclasses.dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    """The ``{data, pagination}`` envelope a fetch function resolves to."""

    data: list[T]
    pagination: PaginationInfo

    @classmethod
    def of(cls, all_items: Sequence[T], page: int, limit: int) -> "PaginatedResponse[T]":
        """Build a page by slicing *all_items* locally."""
        total = len(all_items)
        start = (page - 1) * limit
        return cls(
            data=list(all_items[start:start + limit]),
            pagination=PaginationInfo(
                page=page,
                limit=limit,
                total=total,
                total_pages=math.ceil(total / limit) if limit > 0 else 0,
            ),
        )

    @classmethod
    def coerce(cls, payload: Any) -> "PaginatedResponse[Any]":
        """Accept an instance or a JSON-shaped mapping; reject anything else."""
        if isinstance(payload, PaginatedResponse):
            return payload
        if not isinstance(payload, Mapping):
            raise InvalidEnvelopeError(
                "Fetch result is not a paginated envelope", payload_type=type(payload).__name__
            )
        data = payload.get("data")
        pagination = payload.get("pagination")
        if not isinstance(data, (list, tuple)) or not isinstance(pagination, Mapping):
            raise InvalidEnvelopeError(
                "Fetch result must contain a 'data' list and a 'pagination' mapping",
                payload_type=type(payload).__name__,
            )
        return cls(data=list(data), pagination=PaginationInfo.from_dict(pagination))
