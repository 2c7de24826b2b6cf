# ABOUTME: In-memory implementation of AbstractOverrideSource backed by a dictionary
# ABOUTME: Used by tests and by hosts that assemble overrides programmatically

from typing import Dict, Mapping

from propertyutil.interfaces.sources import AbstractOverrideSource


class InMemoryOverrideSource(AbstractOverrideSource):
    """
    Override source over a snapshot of a mapping.

    The mapping is copied on construction; later changes to the caller's
    dictionary are not observed.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._overrides: Dict[str, str] = dict(overrides or {})

    def get(self, key: str) -> str | None:
        return self._overrides.get(key)
