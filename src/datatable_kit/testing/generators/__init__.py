"""Testing generators – property-based strategies."""
from datatable_kit.testing.generators.strategies import (
    filter_value_strategy,
    search_text_strategy,
    sort_config_strategy,
    table_url_state_strategy,
)

__all__ = [
    "filter_value_strategy",
    "search_text_strategy",
    "sort_config_strategy",
    "table_url_state_strategy",
]
