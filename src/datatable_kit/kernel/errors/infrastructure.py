"""Infrastructure errors – failures of the injected data source."""

from __future__ import annotations

from typing import Any

from datatable_kit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a table state rule violation."""

    default_code = "infrastructure_error"


class FetchError(InfrastructureError):
    """The data source could not produce a page.

    Fetch functions may raise this to control the message the controller
    surfaces through ``error``.
    """

    default_code = "fetch_error"

    def __init__(
        self,
        message: str = "Failed to fetch data",
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


class SerializationError(InfrastructureError):
    """Failed to interpret a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class InvalidEnvelopeError(SerializationError):
    """A fetch result does not look like ``{data, pagination}``."""

    default_code = "invalid_envelope"


__all__ = [
    "FetchError",
    "InfrastructureError",
    "InvalidEnvelopeError",
    "SerializationError",
]
