from .property_cache import NoOpPropertyCache

__all__ = ["NoOpPropertyCache"]
