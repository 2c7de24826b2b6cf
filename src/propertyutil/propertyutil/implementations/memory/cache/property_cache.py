# ABOUTME: In-memory implementation of AbstractPropertyCache with a bounded size
# ABOUTME: Provides thread-safe memoisation that flushes wholesale when full

import threading
from typing import Dict

from propertyutil.interfaces.cache import AbstractPropertyCache

DEFAULT_CACHE_CAPACITY = 2048


class InMemoryPropertyCache(AbstractPropertyCache):
    """
    In-memory implementation of AbstractPropertyCache.

    A dictionary guarded by a single lock. When inserting a new key would
    exceed the capacity, the whole cache is cleared before the entry is
    stored. Overwriting a key that is already cached never triggers a flush.

    Features:
    - Bounded size with wholesale flush on overflow
    - Thread-safe reads, writes and clears
    - Atomic clear
    """

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY):
        """
        Initialize the in-memory property cache.

        Args:
            capacity: Maximum number of entries before the cache is flushed

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError("Cache capacity must be positive")

        self._capacity = capacity
        self._entries: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._capacity:
                self._entries.clear()
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
