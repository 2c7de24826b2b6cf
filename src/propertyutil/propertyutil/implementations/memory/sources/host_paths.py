# ABOUTME: Fixed implementation of AbstractHostPaths
# ABOUTME: Returns base directories given at construction time

from propertyutil.interfaces.sources import AbstractHostPaths


class StaticHostPaths(AbstractHostPaths):
    """Host paths that never change; either may be None."""

    def __init__(self, working_directory: str | None = None, user_home: str | None = None):
        self._working_directory = working_directory
        self._user_home = user_home

    def working_directory(self) -> str | None:
        return self._working_directory

    def user_home(self) -> str | None:
        return self._user_home
