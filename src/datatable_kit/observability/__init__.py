"""Observability – structured logging."""

from datatable_kit.observability.logging import JsonLoggerFactory, Logger, TableContextProcessor, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "TableContextProcessor", "get_logger"]
