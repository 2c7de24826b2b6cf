# ABOUTME: Models package initialization
# ABOUTME: Exports the property bundle model, its source enumeration and bundle naming helpers

from .bundle import BundleSource, ResolvedBundle
from .bundle_name import (
    PROPERTIES_SUFFIX,
    candidate_paths,
    default_locale,
    locale_suffixes,
    normalize_locale,
    split_bundle_name,
    validate_bundle_name,
)

__all__ = [
    "BundleSource",
    "ResolvedBundle",
    "PROPERTIES_SUFFIX",
    "candidate_paths",
    "default_locale",
    "locale_suffixes",
    "normalize_locale",
    "split_bundle_name",
    "validate_bundle_name",
]
