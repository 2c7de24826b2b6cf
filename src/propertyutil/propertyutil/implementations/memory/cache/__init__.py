# ABOUTME: Memory implementations for cache interfaces
# ABOUTME: Provides the bounded in-memory property cache

from .property_cache import DEFAULT_CACHE_CAPACITY, InMemoryPropertyCache

__all__ = ["DEFAULT_CACHE_CAPACITY", "InMemoryPropertyCache"]
