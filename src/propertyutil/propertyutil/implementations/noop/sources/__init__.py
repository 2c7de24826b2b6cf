from .bundle_resolver import NoOpBundleResolver
from .override_source import NoOpOverrideSource

__all__ = ["NoOpBundleResolver", "NoOpOverrideSource"]
