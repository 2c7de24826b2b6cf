# ABOUTME: Bundle loading components
# ABOUTME: Exports the layered bundle loader

from .bundle_loader import BundleLoader

__all__ = ["BundleLoader"]
