# ABOUTME: Property resolver implementing the ordered lookup policy
# ABOUTME: Consults the cache, then the override source, then the bundle, then the default

from loguru import logger

from propertyutil.implementations.memory import InMemoryPropertyCache
from propertyutil.implementations.system import SystemPropertiesOverrideSource
from propertyutil.interfaces.cache import AbstractPropertyCache
from propertyutil.interfaces.sources import AbstractOverrideSource
from propertyutil.models import ResolvedBundle, validate_bundle_name


class PropertyResolver:
    """
    Resolves property keys against layered sources.

    Resolution order for ``get(key, default)``:

    1. the cache, by key, whatever source the cached value came from
    2. the override source
    3. the loaded bundle, if any
    4. ``default``

    A non-None result is cached under ``key``, defaults included. None is
    never cached. Lookups never raise: a failing override source is logged
    and treated as not defining the key.
    """

    def __init__(
        self,
        bundle_name: str,
        bundle: ResolvedBundle | None = None,
        override_source: AbstractOverrideSource | None = None,
        cache: AbstractPropertyCache | None = None,
        use_cache: bool = True,
    ):
        """
        Initialize the resolver.

        Args:
            bundle_name: The bundle name this resolver is bound to.
            bundle: The loaded bundle, or None when no bundle was found.
            override_source: Highest-precedence source. Defaults to the
                process-wide system properties.
            cache: Lookup cache. Defaults to a new InMemoryPropertyCache, so
                resolvers never share entries unless a cache is injected.
            use_cache: Whether ``get`` reads and writes the cache.
        """
        self._bundle_name = validate_bundle_name(bundle_name)
        self._bundle = bundle
        self._override_source = override_source or SystemPropertiesOverrideSource()
        self._cache = cache if cache is not None else InMemoryPropertyCache()
        self.use_cache = use_cache
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")

    @property
    def bundle_name(self) -> str:
        return self._bundle_name

    @property
    def bundle(self) -> ResolvedBundle | None:
        return self._bundle

    @property
    def cache(self) -> AbstractPropertyCache:
        return self._cache

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Resolve ``key``, falling back to ``default``.

        Returns:
            The resolved value, or None when no source has the key and no
            default was given.
        """
        return self.get_system_or_property_string(key, default, self.use_cache)

    def get_system_or_property_string(self, key: str, default: str | None, use_cache: bool) -> str | None:
        """
        Resolve ``key`` with an explicit caching preference.

        Args:
            key: The property key.
            default: Value to use when no source defines the key.
            use_cache: When False the cache is neither read nor written.
        """
        if use_cache:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        result = self._lookup_override(key)

        if result is None and self._bundle is not None:
            result = self._bundle.get(key)

        if result is None:
            result = default

        if use_cache and result is not None:
            self._cache.put(key, result)

        self._logger.trace("Returning property value: <{}>=<{}> (default=<{}>)", key, result, default)
        return result

    def clear_cache(self) -> None:
        """Empty the cache. The loaded bundle is unaffected."""
        self._cache.clear()

    def _lookup_override(self, key: str) -> str | None:
        try:
            return self._override_source.get(key)
        except Exception as e:
            self._logger.warning(f"Override source failed for key {key!r}: {e}")
            return None
