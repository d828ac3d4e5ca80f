"""Application URL sync – query-string projection of table state."""
from datatable_kit.application.url_sync.codec import (
    TableUrlState,
    UrlStateOverrides,
    UrlSyncConfig,
    deserialize,
    parse_overrides,
    serialize,
)
from datatable_kit.application.url_sync.location import InMemoryLocation, LocationAdapter
from datatable_kit.application.url_sync.synchronizer import UrlSynchronizer

__all__ = [
    "InMemoryLocation",
    "LocationAdapter",
    "TableUrlState",
    "UrlStateOverrides",
    "UrlSyncConfig",
    "UrlSynchronizer",
    "deserialize",
    "parse_overrides",
    "serialize",
]
