# ABOUTME: Abstract host paths interface for base directories of file lookups
# ABOUTME: Supplies the working directory and user home used by the bundle loader

from abc import ABC, abstractmethod


class AbstractHostPaths(ABC):
    """
    [L0] Abstract base class providing the base directories searched for bundles.

    Either path may be absent, in which case the bundle loader skips the
    corresponding lookup step.
    """

    @abstractmethod
    def working_directory(self) -> str | None:
        """Return the process working directory, or None if unavailable."""
        pass

    @abstractmethod
    def user_home(self) -> str | None:
        """Return the user's home directory, or None if unavailable."""
        pass
