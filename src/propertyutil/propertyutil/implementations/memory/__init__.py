# ABOUTME: In-memory implementations package
# ABOUTME: Zero-dependency implementations using Python standard library only

from .cache.property_cache import InMemoryPropertyCache
from .sources.bundle_resolver import InMemoryBundleResolver
from .sources.file_system import InMemoryFileSystem
from .sources.host_paths import StaticHostPaths
from .sources.override_source import InMemoryOverrideSource

__all__ = [
    "InMemoryPropertyCache",
    "InMemoryBundleResolver",
    "InMemoryFileSystem",
    "InMemoryOverrideSource",
    "StaticHostPaths",
]
