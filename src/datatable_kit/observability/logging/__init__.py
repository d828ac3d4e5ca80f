"""Observability – structured logging helpers."""
from datatable_kit.observability.logging.factory import JsonLoggerFactory
from datatable_kit.observability.logging.processors import TableContextProcessor, get_logger
from datatable_kit.observability.logging.protocol import Logger

__all__ = ["JsonLoggerFactory", "Logger", "TableContextProcessor", "get_logger"]
