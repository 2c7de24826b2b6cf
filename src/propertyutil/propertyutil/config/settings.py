# ABOUTME: Main configuration composition for the library.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BasePropertyUtilSettings
from .resolver import ResolverSettings


class PropertyUtilSettings(BasePropertyUtilSettings, ResolverSettings):
    """Represents the complete, composed configuration of the library.

    This class aggregates the foundational settings and the resolver settings
    into a single object. Each settings module stays self-contained while the
    library reads one `PropertyUtilSettings` instance.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> PropertyUtilSettings:
    """Provides a singleton instance of the library settings.

    This function uses a cache (`lru_cache`) so that environment variables and
    the ``.env`` file are read once. Call ``get_settings.cache_clear()`` to
    pick up changed environment variables.

    Returns:
        A single, cached instance of the PropertyUtilSettings class.
    """
    return PropertyUtilSettings()
