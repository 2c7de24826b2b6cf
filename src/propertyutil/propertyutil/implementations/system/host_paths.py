# ABOUTME: Process implementation of AbstractHostPaths
# ABOUTME: Uses user.dir and user.home system properties, else the process cwd and home

import os

from propertyutil.interfaces.sources import AbstractHostPaths
from propertyutil.implementations.system.system_properties import SystemProperties, system_properties

USER_DIR_PROPERTY = "user.dir"
USER_HOME_PROPERTY = "user.home"


class ProcessHostPaths(AbstractHostPaths):
    """
    Base directories of the running process.

    The ``user.dir`` and ``user.home`` system properties win when set, which
    lets a launcher redirect lookups without changing the process state.
    """

    def __init__(self, properties: SystemProperties | None = None):
        self._properties = properties if properties is not None else system_properties

    def working_directory(self) -> str | None:
        configured = self._properties.get(USER_DIR_PROPERTY)
        if configured:
            return configured
        try:
            return os.getcwd()
        except OSError:
            # The working directory was removed from under the process
            return None

    def user_home(self) -> str | None:
        configured = self._properties.get(USER_HOME_PROPERTY)
        if configured:
            return configured
        home = os.path.expanduser("~")
        return None if home == "~" else home
