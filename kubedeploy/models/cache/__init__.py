"""Cache models."""

from kubedeploy.models.cache.data_cache import CacheEntry, DataCache

__all__ = ["CacheEntry", "DataCache"]
