"""
datatable_kit – search, filter, sort and pagination state for data tables.

Import path convention::

    from datatable_kit.application.datatable import DataTableController
    from datatable_kit.application.url_sync import UrlSynchronizer, InMemoryLocation
    from datatable_kit.kernel.timers import AsyncioTimerScheduler
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
