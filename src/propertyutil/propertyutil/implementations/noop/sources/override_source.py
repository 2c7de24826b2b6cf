# ABOUTME: NoOp implementation of AbstractOverrideSource that defines no overrides
# ABOUTME: Used when a host wants files and defaults only

from propertyutil.interfaces.sources import AbstractOverrideSource


class NoOpOverrideSource(AbstractOverrideSource):
    """Override source that never defines a key."""

    def get(self, key: str) -> str | None:
        return None
