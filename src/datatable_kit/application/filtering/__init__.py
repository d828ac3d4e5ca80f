"""Application filtering – typed filter record with default detection."""
from datatable_kit.application.filtering.state import FilterState, is_sequence_value, is_value_active

__all__ = ["FilterState", "is_sequence_value", "is_value_active"]
