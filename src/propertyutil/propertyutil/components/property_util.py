# ABOUTME: PropertyUtil facade, the public entry point for reading properties
# ABOUTME: Loads a bundle once at construction and resolves keys through a PropertyResolver

from loguru import logger

from propertyutil.components.loader import BundleLoader
from propertyutil.components.resolver import PropertyResolver
from propertyutil.config import PropertyUtilSettings, get_settings
from propertyutil.implementations.memory import InMemoryPropertyCache
from propertyutil.interfaces.cache import AbstractPropertyCache
from propertyutil.interfaces.sources import AbstractOverrideSource
from propertyutil.models import ResolvedBundle, validate_bundle_name


class PropertyUtil:
    """
    Reads string properties from the following sources, in order:

    1. System properties: ``-Dproperty.name=...`` on the command line
    2. A properties file below the working directory: ``./bundlename.properties``
    3. A properties file below the user home directory: ``~/bundlename.properties``
    4. A packaged properties file on the import path: ``/bundlename.properties``

    then falls back to the caller's default. The bundle is located once, when
    the instance is created; the bundle name cannot be changed afterwards.

    Example:
        >>> props = PropertyUtil("myapp", "conf")
        >>> props.get("db.url", "sqlite:///local.db")
        'sqlite:///local.db'
    """

    # The default preference for caching properties.
    DEFAULT_USE_CACHE = True

    def __init__(
        self,
        bundle_name: str,
        subdirectory: str = "",
        *,
        override_source: AbstractOverrideSource | None = None,
        loader: BundleLoader | None = None,
        cache: AbstractPropertyCache | None = None,
        use_cache: bool | None = None,
        settings: PropertyUtilSettings | None = None,
    ):
        """
        Create a facade bound to ``bundle_name`` and load its bundle.

        Args:
            bundle_name: Dotted bundle name.
            subdirectory: Directory below the working directory and user home
                to search in.
            override_source: Highest-precedence source. Defaults to the
                process-wide system properties.
            loader: Bundle loader. Defaults to a BundleLoader over the process.
            cache: Lookup cache. Defaults to an InMemoryPropertyCache sized by
                CACHE_CAPACITY.
            use_cache: Caching preference for ``get``. Defaults to USE_CACHE.
            settings: Settings to read defaults from. Defaults to get_settings().

        Raises:
            ValidationException: If the bundle name is None, empty or malformed.
        """
        validate_bundle_name(bundle_name)
        settings = settings or get_settings()

        self._subdirectory = subdirectory or ""
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")
        self._logger.trace(f"PropertyUtil: bundle_name={bundle_name}")

        loader = loader or BundleLoader(settings=settings)
        bundle = loader.load(bundle_name, self._subdirectory)

        self._resolver = PropertyResolver(
            bundle_name,
            bundle=bundle,
            override_source=override_source,
            cache=cache if cache is not None else InMemoryPropertyCache(settings.CACHE_CAPACITY),
            use_cache=settings.USE_CACHE if use_cache is None else use_cache,
        )

    @property
    def bundle_name(self) -> str:
        """The property bundle name used for fetching properties."""
        return self._resolver.bundle_name

    @property
    def subdirectory(self) -> str:
        return self._subdirectory

    @property
    def bundle(self) -> ResolvedBundle | None:
        """The loaded bundle, or None when no source had it."""
        return self._resolver.bundle

    @property
    def use_cache(self) -> bool:
        return self._resolver.use_cache

    @property
    def resolver(self) -> PropertyResolver:
        return self._resolver

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Check for ``key`` in the system properties, then in the bundle, then
        use ``default``.

        Returns:
            The string matching the key, or None if nothing matched and no
            default was given.
        """
        return self._resolver.get(key, default)

    def get_system_or_property_string(self, key: str, default: str | None, use_cache: bool) -> str | None:
        """Like ``get`` with an explicit choice of whether to use the cache."""
        return self._resolver.get_system_or_property_string(key, default, use_cache)

    def clear_cache(self) -> None:
        """Clear the internal property cache."""
        self._resolver.clear_cache()

    def __repr__(self) -> str:
        return f"PropertyUtil(bundle_name='{self.bundle_name}', subdirectory='{self.subdirectory}')"
