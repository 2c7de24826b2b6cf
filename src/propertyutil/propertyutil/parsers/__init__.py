# ABOUTME: Parsers package exports
# ABOUTME: Exposes the properties-format parser functions

from .properties import DEFAULT_ENCODING, load_properties, parse_properties

__all__ = [
    "DEFAULT_ENCODING",
    "load_properties",
    "parse_properties",
]
