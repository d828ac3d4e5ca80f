"""Application datatable – the controller composing search, filters, sort and pagination."""
from datatable_kit.application.datatable.controller import (
    DEFAULT_ERROR_MESSAGE,
    DataTableController,
    FetchStatus,
    describe_error,
)
from datatable_kit.application.datatable.data_source import InMemoryDataSource
from datatable_kit.application.datatable.query import Fetcher, TableQuery

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "DataTableController",
    "FetchStatus",
    "Fetcher",
    "InMemoryDataSource",
    "TableQuery",
    "describe_error",
]
