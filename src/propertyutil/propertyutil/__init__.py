# ABOUTME: Property resolution package initialization
# ABOUTME: Reads string properties from system properties, property files and packaged bundles

"""
Layered property resolution.

This package reads string-valued configuration properties from, in order,
process-level system properties, a ``.properties`` file below the working
directory, one below the user home, and a packaged bundle, returning the
first value found and otherwise a caller-supplied default.
"""

from propertyutil.components import (
    BundleLoader,
    PropertyResolver,
    PropertyUtil,
    PropertyUtilHolder,
    get_property_util_holder,
)
from propertyutil.implementations.system import system_properties
from propertyutil.models import BundleSource, ResolvedBundle

__version__ = "0.1.0"

__all__ = [
    "BundleLoader",
    "BundleSource",
    "PropertyResolver",
    "PropertyUtil",
    "PropertyUtilHolder",
    "ResolvedBundle",
    "get_property_util_holder",
    "system_properties",
]
