"""Kernel – framework-agnostic building blocks."""

from datatable_kit.kernel.errors import (
    ApplicationError,
    BaseError,
    ControllerClosedError,
    DomainError,
    FetchError,
    InfrastructureError,
    InvalidEnvelopeError,
    SerializationError,
    UnknownFilterFieldError,
    ValidationError,
)
from datatable_kit.kernel.timers import AsyncioTimerScheduler, Debouncer, TimerHandle, TimerScheduler

__all__ = [
    "ApplicationError",
    "AsyncioTimerScheduler",
    "BaseError",
    "ControllerClosedError",
    "Debouncer",
    "DomainError",
    "FetchError",
    "InfrastructureError",
    "InvalidEnvelopeError",
    "SerializationError",
    "TimerHandle",
    "TimerScheduler",
    "UnknownFilterFieldError",
    "ValidationError",
]
