# ABOUTME: Cache interfaces
# ABOUTME: Exports the property cache contract

from .property_cache import AbstractPropertyCache

__all__ = ["AbstractPropertyCache"]
