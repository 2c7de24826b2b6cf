# ABOUTME: Packaged-bundle resolver searching the import path for .properties files
# ABOUTME: Reads files below each sys.path root without importing any package

import os
import sys
from typing import Dict, List, Mapping, Sequence, Tuple

from loguru import logger

from propertyutil.exceptions import PathIOException, PropertiesParseException
from propertyutil.implementations.system.file_system import LocalFileSystem
from propertyutil.interfaces.sources import AbstractBundleResolver, AbstractFileSystem
from propertyutil.models import candidate_paths
from propertyutil.parsers import DEFAULT_ENCODING, parse_properties


class PackagedBundleResolver(AbstractBundleResolver):
    """
    Resolves bundles shipped alongside installed code.

    Each candidate file (``baz.properties``, then locale variants) is looked up
    independently under every root of the search path, in order. A bundle
    inside an installed package, e.g. ``mypkg/conf.properties`` for the name
    ``mypkg.conf``, is found through the root the package was installed to.
    Found files are layered so that more specific locale variants override
    the plain bundle.

    Lookups only probe and read files; no package is ever imported.

    Args:
        search_path: Roots to search. Defaults to ``sys.path`` at lookup time.
        locale: Locale used for variant candidates, or None for the plain file only.
        encoding: Encoding of the properties files.
        file_system: File system primitives. Defaults to LocalFileSystem.
    """

    def __init__(
        self,
        search_path: Sequence[str] | None = None,
        locale: str | None = None,
        encoding: str = DEFAULT_ENCODING,
        file_system: AbstractFileSystem | None = None,
    ):
        self._search_path = list(search_path) if search_path is not None else None
        self.locale = locale
        self.encoding = encoding
        self._file_system = file_system or LocalFileSystem()
        self._locations: Dict[str, str] = {}
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")

    @property
    def search_path(self) -> List[str]:
        return list(self._search_path) if self._search_path is not None else list(sys.path)

    def resolve(self, bundle_name: str) -> Mapping[str, str] | None:
        entries: Dict[str, str] = {}
        location: str | None = None

        for parts in candidate_paths(bundle_name, self.locale):
            found = self._find(parts)
            if found is None:
                continue
            content, where = found
            try:
                entries.update(parse_properties(content, self.encoding))
            except PropertiesParseException as e:
                self._logger.debug(f"Malformed packaged properties file {where}: {e.message}")
                continue
            location = where

        if location is None:
            return None

        self._locations[bundle_name] = location
        return entries

    def describe(self, bundle_name: str) -> str | None:
        return self._locations.get(bundle_name)

    def _find(self, parts: Tuple[str, ...]) -> Tuple[bytes, str] | None:
        for root in self.search_path:
            path = os.path.join(root or os.curdir, *parts)
            if not self._file_system.exists(path):
                continue
            try:
                return self._file_system.read_bytes(path), path
            except PathIOException as e:
                self._logger.debug(f"Could not read packaged properties file {path}: {e.message}")
        return None
