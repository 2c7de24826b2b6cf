# ABOUTME: System implementations package
# ABOUTME: Bindings to the running process: system properties, environment, file system and import path

from .bundle_resolver import PackagedBundleResolver
from .environment import EnvironmentOverrideSource
from .file_system import LocalFileSystem
from .host_paths import USER_DIR_PROPERTY, USER_HOME_PROPERTY, ProcessHostPaths
from .system_properties import SystemProperties, SystemPropertiesOverrideSource, system_properties

__all__ = [
    "PackagedBundleResolver",
    "EnvironmentOverrideSource",
    "LocalFileSystem",
    "ProcessHostPaths",
    "USER_DIR_PROPERTY",
    "USER_HOME_PROPERTY",
    "SystemProperties",
    "SystemPropertiesOverrideSource",
    "system_properties",
]
