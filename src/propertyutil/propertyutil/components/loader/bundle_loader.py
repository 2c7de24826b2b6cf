# ABOUTME: Bundle loader locating a properties bundle across layered sources
# ABOUTME: Searches the working directory, then the user home, then packaged bundles

import os
import posixpath
from typing import Callable, Dict, List, Tuple

from loguru import logger

from propertyutil.config import PropertyUtilSettings, get_settings
from propertyutil.exceptions import (
    BundleNotFoundException,
    PathIOException,
    PropertiesParseException,
    ValidationException,
)
from propertyutil.implementations.system import LocalFileSystem, PackagedBundleResolver, ProcessHostPaths
from propertyutil.interfaces.sources import AbstractBundleResolver, AbstractFileSystem, AbstractHostPaths
from propertyutil.models import (
    BundleSource,
    ResolvedBundle,
    candidate_paths,
    default_locale,
    normalize_locale,
    validate_bundle_name,
)
from propertyutil.parsers import parse_properties

_SEPARATORS = ("/", os.sep)

# Errors that mean "not found" for a single lookup step
_STEP_ERRORS = (BundleNotFoundException, PathIOException, PropertiesParseException)


class BundleLoader:
    """
    Locates and parses a property bundle, first success wins.

    Lookup order:

    1. ``<working directory>/<subdirectory>/a/b/c.properties``
    2. ``<user home>/<subdirectory>/a/b/c.properties``
    3. the packaged-bundle resolver, keyed by the bundle name

    Within a directory, locale variants (``c_en.properties``,
    ``c_en_US.properties``) are layered over the plain file. The first
    directory holding any candidate file wins outright, even for keys it does
    not define. When nothing is found the loader returns None; it never falls
    back to another bundle name.

    All collaborators are injectable; by default the loader works on the
    local file system, the process paths and the import path.
    """

    def __init__(
        self,
        file_system: AbstractFileSystem | None = None,
        host_paths: AbstractHostPaths | None = None,
        packaged_resolver: AbstractBundleResolver | None = None,
        locale: str | None = None,
        encoding: str | None = None,
        settings: PropertyUtilSettings | None = None,
    ):
        """
        Initialize the bundle loader.

        Args:
            file_system: File system primitives. Defaults to LocalFileSystem.
            host_paths: Base directories. Defaults to ProcessHostPaths.
            packaged_resolver: Final fallback. Defaults to PackagedBundleResolver.
            locale: Locale for variants. Defaults to the configured LOCALE, then
                the process locale. Pass ``"C"`` to disable variants.
            encoding: Encoding of properties files. Defaults to FILE_ENCODING.
            settings: Settings to read defaults from. Defaults to get_settings().
        """
        settings = settings or get_settings()

        if locale is None:
            locale = settings.LOCALE if settings.LOCALE is not None else default_locale()
        self.locale = normalize_locale(locale)
        self.encoding = encoding or settings.FILE_ENCODING

        self._file_system = file_system or LocalFileSystem()
        self._host_paths = host_paths or ProcessHostPaths()
        self._packaged_resolver = packaged_resolver or PackagedBundleResolver(
            locale=self.locale, encoding=self.encoding, file_system=self._file_system
        )
        self._logger = logger.bind(name=f"{__name__}.{type(self).__name__}")

    @staticmethod
    def search_directory(base: str, subdirectory: str = "") -> str:
        """Append ``subdirectory`` to ``base``, adding a separator only when needed."""
        if base.endswith(_SEPARATORS):
            return base + subdirectory
        return base + "/" + subdirectory

    def load(self, bundle_name: str, subdirectory: str = "") -> ResolvedBundle | None:
        """
        Load a bundle from the first source that has it.

        Args:
            bundle_name: Dotted bundle name, e.g. ``"foo.bar.baz"``.
            subdirectory: Directory below each base directory to search in.

        Returns:
            The resolved bundle, or None when no source has it.

        Raises:
            ValidationException: If the bundle name or subdirectory is invalid.
        """
        validate_bundle_name(bundle_name)
        if not isinstance(subdirectory, str):
            raise ValidationException(
                "Subdirectory must be a string",
                code="INVALID_SUBDIRECTORY",
                details={"type": type(subdirectory).__name__},
            )

        for source, label, base in self._base_directories():
            if base is None:
                self._logger.debug(f"Could not find {label} path")
                continue

            directory = self.search_directory(base, subdirectory)
            self._logger.debug(f"Looking for property bundle in {label} + subdirectory: {directory}")
            try:
                bundle = self._load_from_directory(bundle_name, directory, source)
            except _STEP_ERRORS as e:
                self._logger.debug(f"Property bundle {bundle_name} not loaded from {label}: {e.message}")
                continue

            self._logger.debug(f"Found property bundle in {label} + subdirectory: {bundle.location}")
            return bundle

        self._logger.debug("Looking for packaged property bundle")
        try:
            bundle = self._load_packaged(bundle_name)
        except _STEP_ERRORS as e:
            self._logger.debug(f"Property bundle {bundle_name} not loaded from packages: {e.message}")
        else:
            self._logger.debug(f"Found packaged property bundle: {bundle_name}")
            return bundle

        self._logger.info(f"Could not find property bundle: {bundle_name}")
        return None

    def _base_directories(self) -> List[Tuple[BundleSource, str, str | None]]:
        steps: List[Tuple[BundleSource, str, Callable[[], str | None]]] = [
            (BundleSource.WORKING_DIRECTORY, "working directory", self._host_paths.working_directory),
            (BundleSource.USER_HOME, "user home", self._host_paths.user_home),
        ]
        return [(source, label, lookup()) for source, label, lookup in steps]

    def _load_from_directory(self, bundle_name: str, directory: str, source: BundleSource) -> ResolvedBundle:
        if not self._file_system.exists(directory):
            raise BundleNotFoundException(
                f"Directory does not exist: {directory}",
                details={"bundle_name": bundle_name, "directory": directory},
            )

        entries: Dict[str, str] = {}
        location: str | None = None
        for parts in candidate_paths(bundle_name, self.locale):
            path = posixpath.join(directory, *parts)
            if not self._file_system.exists(path):
                continue
            entries.update(parse_properties(self._file_system.read_bytes(path), self.encoding))
            location = path

        if location is None:
            raise BundleNotFoundException(
                f"No properties file for {bundle_name} in {directory}",
                details={"bundle_name": bundle_name, "directory": directory},
            )
        return ResolvedBundle(name=bundle_name, source=source, entries=entries, location=location)

    def _load_packaged(self, bundle_name: str) -> ResolvedBundle:
        entries = self._packaged_resolver.resolve(bundle_name)
        if entries is None:
            raise BundleNotFoundException(
                f"No packaged bundle named {bundle_name}",
                details={"bundle_name": bundle_name},
            )
        return ResolvedBundle(
            name=bundle_name,
            source=BundleSource.PACKAGED,
            entries=entries,
            location=self._packaged_resolver.describe(bundle_name),
        )
