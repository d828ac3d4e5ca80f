"""Application-layer errors – misuse of the controller lifecycle."""

from __future__ import annotations

from typing import Any

from datatable_kit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ControllerClosedError(ApplicationError):
    """A mutator was called after the controller was closed."""

    default_code = "controller_closed"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Data table '{name}' is closed", **kwargs)
        self.name = name


__all__ = ["ApplicationError", "ControllerClosedError"]
