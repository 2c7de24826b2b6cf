# ABOUTME: Abstract property cache interface for memoising resolved keys
# ABOUTME: Defines a bounded, thread-safe key to value store with an explicit clear

from abc import ABC, abstractmethod


class AbstractPropertyCache(ABC):
    """
    [L0] Abstract base class for the resolver's lookup cache.

    Implementations must be safe to call from any thread. ``clear`` must be
    atomic with respect to the other operations: readers observe either the
    old contents or the empty cache, never a partially cleared one.
    """

    @property
    @abstractmethod
    def capacity(self) -> int:
        """The maximum number of entries the cache holds before it is flushed."""
        pass

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the cached value for ``key``, or None on a miss."""
        pass

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """
        Cache ``value`` under ``key``.

        Implementations must never grow past ``capacity``. Concurrent writers
        for the same key may race; the last write wins.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
