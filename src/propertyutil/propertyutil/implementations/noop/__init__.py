# ABOUTME: NoOp implementations package
# ABOUTME: Contains no-operation implementations for testing and for disabling sources

# Cache implementations
from .cache.property_cache import NoOpPropertyCache

# Source implementations
from .sources.bundle_resolver import NoOpBundleResolver
from .sources.override_source import NoOpOverrideSource

__all__ = [
    # Cache
    "NoOpPropertyCache",
    # Sources
    "NoOpBundleResolver",
    "NoOpOverrideSource",
]
