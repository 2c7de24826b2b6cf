# ABOUTME: NoOp implementation of AbstractPropertyCache that never stores anything
# ABOUTME: Lets a resolver run with caching switched off without special cases

from propertyutil.interfaces.cache import AbstractPropertyCache


class NoOpPropertyCache(AbstractPropertyCache):
    """
    No-operation implementation of AbstractPropertyCache.

    Every lookup misses and every write is discarded, so each ``get`` on a
    resolver using this cache re-queries the underlying sources.

    Use Cases:
    - Hosts that want every read to observe the current override table
    - Benchmarking the uncached lookup path
    """

    def __init__(self):
        """Initialize the no-operation cache."""
        # No initialization needed for NoOp implementation
        pass

    @property
    def capacity(self) -> int:
        return 0

    def get(self, key: str) -> str | None:
        return None

    def put(self, key: str, value: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def __len__(self) -> int:
        return 0
