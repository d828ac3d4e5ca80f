"""Application cache – TTL cache for fetched table pages."""
from datatable_kit.application.cache.query_cache import CacheEntry, QueryCache

__all__ = ["CacheEntry", "QueryCache"]
