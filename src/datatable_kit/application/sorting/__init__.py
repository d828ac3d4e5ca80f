"""Application sorting – single-column sort state and local comparator."""
from datatable_kit.application.sorting.comparator import compare_values, sort_rows
from datatable_kit.application.sorting.state import SortConfig, SortDirection, SortState

__all__ = ["SortConfig", "SortDirection", "SortState", "compare_values", "sort_rows"]
