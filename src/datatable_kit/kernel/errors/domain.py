"""Domain errors – table state rule violations."""

from __future__ import annotations

from typing import Any

from datatable_kit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a table state rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownFilterFieldError(ValidationError, KeyError):
    """A filter operation named a field missing from the default record.

    Also a :class:`KeyError`, since the filter record is a mapping.
    """

    default_code = "unknown_filter_field"

    def __init__(self, fields: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Unknown filter field(s): {', '.join(fields)}",
            errors=[{"field": field, "reason": "unknown filter field"} for field in fields],
            **kwargs,
        )
        self.fields = fields


__all__ = ["DomainError", "UnknownFilterFieldError", "ValidationError"]
