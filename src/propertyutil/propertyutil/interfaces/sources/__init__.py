# ABOUTME: Host collaborator interfaces
# ABOUTME: Override source, packaged-bundle resolver, host paths and file system contracts

from .bundle_resolver import AbstractBundleResolver
from .file_system import AbstractFileSystem
from .host_paths import AbstractHostPaths
from .override_source import AbstractOverrideSource

__all__ = [
    "AbstractBundleResolver",
    "AbstractFileSystem",
    "AbstractHostPaths",
    "AbstractOverrideSource",
]
