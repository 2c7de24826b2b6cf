# ABOUTME: In-memory implementation of AbstractBundleResolver
# ABOUTME: Resolves packaged bundles from a dictionary of bundle name to entries

from types import MappingProxyType
from typing import Dict, Mapping

from propertyutil.interfaces.sources import AbstractBundleResolver


class InMemoryBundleResolver(AbstractBundleResolver):
    """
    Packaged-bundle resolver over a fixed set of named bundles.

    Bundle names are matched exactly; no locale variants are considered.
    """

    def __init__(self, bundles: Mapping[str, Mapping[str, str]] | None = None):
        self._bundles: Dict[str, Mapping[str, str]] = {
            name: MappingProxyType(dict(entries)) for name, entries in (bundles or {}).items()
        }

    def resolve(self, bundle_name: str) -> Mapping[str, str] | None:
        return self._bundles.get(bundle_name)

    def describe(self, bundle_name: str) -> str | None:
        if bundle_name in self._bundles:
            return f"memory:{bundle_name}"
        return None
