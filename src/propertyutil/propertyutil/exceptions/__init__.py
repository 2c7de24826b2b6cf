# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy used across the library

from propertyutil.exceptions.base import (
    PropertyUtilException,
    ValidationException,
    ConfigurationException,
    BundleNotFoundException,
    PathIOException,
    PropertiesParseException,
)

__all__ = [
    "PropertyUtilException",
    "ValidationException",
    "ConfigurationException",
    "BundleNotFoundException",
    "PathIOException",
    "PropertiesParseException",
]
