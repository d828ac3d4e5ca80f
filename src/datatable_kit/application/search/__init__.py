"""Application search – debounced free-text query state."""
from datatable_kit.application.search.state import SearchState

__all__ = ["SearchState"]
