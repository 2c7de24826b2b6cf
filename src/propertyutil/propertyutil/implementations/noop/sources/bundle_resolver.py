# ABOUTME: NoOp implementation of AbstractBundleResolver that finds no packaged bundles
# ABOUTME: Disables the packaged fallback of the bundle loader

from typing import Mapping

from propertyutil.interfaces.sources import AbstractBundleResolver


class NoOpBundleResolver(AbstractBundleResolver):
    """Packaged-bundle resolver that never resolves a bundle."""

    def resolve(self, bundle_name: str) -> Mapping[str, str] | None:
        return None
