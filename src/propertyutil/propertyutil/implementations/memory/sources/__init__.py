# ABOUTME: Memory implementations for host collaborator interfaces
# ABOUTME: Dictionary-backed override source, bundle resolver, file system and fixed host paths

from .bundle_resolver import InMemoryBundleResolver
from .file_system import InMemoryFileSystem
from .host_paths import StaticHostPaths
from .override_source import InMemoryOverrideSource

__all__ = [
    "InMemoryBundleResolver",
    "InMemoryFileSystem",
    "InMemoryOverrideSource",
    "StaticHostPaths",
]
