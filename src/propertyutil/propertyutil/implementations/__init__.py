# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the library interfaces

"""
Implementations

- ``memory``: dictionary-backed implementations for tests and programmatic hosts
- ``noop``: implementations that store or find nothing
- ``system``: bindings to the running process
"""

from .memory import InMemoryPropertyCache
from .noop import NoOpPropertyCache
from .system import (
    LocalFileSystem,
    PackagedBundleResolver,
    ProcessHostPaths,
    SystemPropertiesOverrideSource,
)

__all__ = [
    "InMemoryPropertyCache",
    "NoOpPropertyCache",
    "LocalFileSystem",
    "PackagedBundleResolver",
    "ProcessHostPaths",
    "SystemPropertiesOverrideSource",
]
