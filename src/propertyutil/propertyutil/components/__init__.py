# ABOUTME: Components package exports
# ABOUTME: Bundle loading, property resolution, the PropertyUtil facade and its process-wide holder

from .loader import BundleLoader
from .resolver import PropertyResolver
from .property_util import PropertyUtil
from .holder import PropertyUtilHolder, get_property_util_holder

__all__ = [
    "BundleLoader",
    "PropertyResolver",
    "PropertyUtil",
    "PropertyUtilHolder",
    "get_property_util_holder",
]
