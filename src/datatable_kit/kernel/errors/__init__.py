"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── UnknownFilterFieldError  (also a KeyError)
    ├── ApplicationError         (application.py)
    │   └── ControllerClosedError
    └── InfrastructureError      (infrastructure.py)
        ├── FetchError
        └── SerializationError
            └── InvalidEnvelopeError
"""

from datatable_kit.kernel.errors.application import ApplicationError, ControllerClosedError
from datatable_kit.kernel.errors.base import BaseError
from datatable_kit.kernel.errors.domain import DomainError, UnknownFilterFieldError, ValidationError
from datatable_kit.kernel.errors.infrastructure import (
    FetchError,
    InfrastructureError,
    InvalidEnvelopeError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ControllerClosedError",
    "DomainError",
    "FetchError",
    "InfrastructureError",
    "InvalidEnvelopeError",
    "SerializationError",
    "UnknownFilterFieldError",
    "ValidationError",
]
