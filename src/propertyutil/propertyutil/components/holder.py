# ABOUTME: Process-wide holder for a PropertyUtil that can be re-bound to another bundle
# ABOUTME: Preserves a global accessor surface on top of immutable PropertyUtil instances

import threading
from functools import lru_cache
from typing import Callable

from loguru import logger

from propertyutil.components.property_util import PropertyUtil
from propertyutil.config import PropertyUtilSettings, get_settings
from propertyutil.exceptions import ConfigurationException


class PropertyUtilHolder:
    """
    Holds one PropertyUtil for the whole process.

    Binding to a new bundle name constructs a fresh PropertyUtil; the previous
    instance's cache is cleared and the instance is dropped. Used before any
    ``bind``, the holder binds itself to DEFAULT_BUNDLE_NAME when configured.
    """

    def __init__(
        self,
        factory: Callable[[str, str], PropertyUtil] = PropertyUtil,
        settings: PropertyUtilSettings | None = None,
    ):
        self._factory = factory
        self._settings = settings
        self._instance: PropertyUtil | None = None
        self._lock = threading.Lock()
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")

    @property
    def is_bound(self) -> bool:
        return self._instance is not None

    def bind(self, bundle_name: str, subdirectory: str = "") -> PropertyUtil:
        """
        Bind the holder to ``bundle_name``, replacing any previous binding.

        Returns:
            The newly created PropertyUtil.
        """
        with self._lock:
            instance = self._factory(bundle_name, subdirectory)
            previous, self._instance = self._instance, instance

        if previous is not None:
            previous.clear_cache()
        self._logger.trace(f"PropertyUtilHolder: bound bundle_name={bundle_name}")
        return instance

    @property
    def current(self) -> PropertyUtil:
        """
        The bound PropertyUtil.

        Raises:
            ConfigurationException: If nothing is bound and no default bundle
                name is configured.
        """
        instance = self._instance
        if instance is not None:
            return instance

        settings = self._settings or get_settings()
        with self._lock:
            if self._instance is None:
                if settings.DEFAULT_BUNDLE_NAME is None:
                    raise ConfigurationException(
                        "No property bundle bound and no default bundle name configured",
                        code="BUNDLE_NOT_BOUND",
                    )
                self._instance = self._factory(settings.DEFAULT_BUNDLE_NAME, settings.DEFAULT_SUBDIRECTORY)
            return self._instance

    @property
    def bundle_name(self) -> str:
        return self.current.bundle_name

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.current.get(key, default)

    def clear_cache(self) -> None:
        instance = self._instance
        if instance is not None:
            instance.clear_cache()

    def reset(self) -> None:
        """Drop the current binding."""
        with self._lock:
            self._instance = None


@lru_cache
def get_property_util_holder() -> PropertyUtilHolder:
    """Provides the process-wide PropertyUtilHolder."""
    return PropertyUtilHolder()
