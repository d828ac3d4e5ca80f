"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["datatable_kit.testing.fixtures"]
"""

from datatable_kit.testing.fakes import ManualTimerHandle, ManualTimerScheduler, ScriptedFetcher
from datatable_kit.testing.generators import (
    filter_value_strategy,
    search_text_strategy,
    sort_config_strategy,
    table_url_state_strategy,
)

__all__ = [
    "ManualTimerHandle",
    "ManualTimerScheduler",
    "ScriptedFetcher",
    "filter_value_strategy",
    "search_text_strategy",
    "sort_config_strategy",
    "table_url_state_strategy",
]
