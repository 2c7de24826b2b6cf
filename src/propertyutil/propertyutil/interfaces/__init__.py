# ABOUTME: Interfaces package exports
# ABOUTME: Exports all abstract interfaces for host collaborators and caching

# Host collaborator interfaces
from .sources import (
    AbstractBundleResolver,
    AbstractFileSystem,
    AbstractHostPaths,
    AbstractOverrideSource,
)

# Cache interfaces
from .cache import AbstractPropertyCache

__all__ = [
    # Sources
    "AbstractBundleResolver",
    "AbstractFileSystem",
    "AbstractHostPaths",
    "AbstractOverrideSource",
    # Cache
    "AbstractPropertyCache",
]
