"""Testing fixtures – pytest fixtures for table tests.

Enable in ``conftest.py``::

    pytest_plugins = ["datatable_kit.testing.fixtures"]
"""
from __future__ import annotations

try:
    import pytest

    @pytest.fixture
    def manual_scheduler():
        """Pytest fixture: a ManualTimerScheduler at virtual time 0."""
        from datatable_kit.testing.fakes import ManualTimerScheduler
        return ManualTimerScheduler()

    @pytest.fixture
    def scripted_fetcher():
        """Pytest fixture: a ScriptedFetcher answering empty pages."""
        from datatable_kit.testing.fakes import ScriptedFetcher
        return ScriptedFetcher()

    @pytest.fixture
    def memory_location():
        """Pytest fixture: an InMemoryLocation with an empty query string."""
        from datatable_kit.application.url_sync import InMemoryLocation
        return InMemoryLocation()

except ImportError:
    pass

__all__ = ["manual_scheduler", "memory_location", "scripted_fetcher"]
