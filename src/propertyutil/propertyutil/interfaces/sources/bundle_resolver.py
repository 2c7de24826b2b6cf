# ABOUTME: Abstract packaged-bundle resolver interface
# ABOUTME: Defines the contract for looking up bundles shipped with installed code

from abc import ABC, abstractmethod
from typing import Mapping


class AbstractBundleResolver(ABC):
    """
    [L0] Abstract base class for resolving packaged property bundles.

    The packaged bundle is the last fallback of the bundle loader, so that
    libraries can ship sane defaults next to their code. Implementations
    receive the dotted bundle name unchanged and apply their own naming
    convention.
    """

    @abstractmethod
    def resolve(self, bundle_name: str) -> Mapping[str, str] | None:
        """
        Resolve a packaged bundle by name.

        Args:
            bundle_name (str): The dotted bundle name, e.g. ``"foo.bar.baz"``.

        Returns:
            Mapping[str, str] | None: The bundle entries, or None when no
            packaged bundle with that name exists.
        """
        pass

    def describe(self, bundle_name: str) -> str | None:
        """
        Describe where ``bundle_name`` was resolved from, for diagnostics.

        Returns:
            str | None: A human-readable location, or None if unknown.
        """
        return None
