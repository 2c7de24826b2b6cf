# ABOUTME: In-memory implementation of AbstractFileSystem
# ABOUTME: Serves file contents from a dictionary and infers directories from file paths

import posixpath
from typing import Dict, Iterable, Mapping, Set

from propertyutil.exceptions import PathIOException
from propertyutil.interfaces.sources import AbstractFileSystem


class InMemoryFileSystem(AbstractFileSystem):
    """
    A file system made of a dictionary of POSIX-style absolute paths to contents.

    Every ancestor directory of a file exists implicitly. Extra empty
    directories can be declared with ``directories``. Paths listed in
    ``unreadable`` exist but raise PathIOException when read, which lets tests
    exercise I/O failure handling.
    """

    def __init__(
        self,
        files: Mapping[str, bytes | str] | None = None,
        directories: Iterable[str] = (),
        unreadable: Iterable[str] = (),
    ):
        self._files: Dict[str, bytes] = {}
        self._directories: Set[str] = set()
        self._unreadable: Set[str] = {self._normalize(p) for p in unreadable}

        for path, content in (files or {}).items():
            self.add_file(path, content)
        for directory in directories:
            self.add_directory(directory)
        for path in self._unreadable:
            self._add_parents(path)

    def add_file(self, path: str, content: bytes | str) -> None:
        normalized = self._normalize(path)
        if isinstance(content, str):
            content = content.encode("iso-8859-1")
        self._files[normalized] = content
        self._add_parents(normalized)

    def add_directory(self, path: str) -> None:
        normalized = self._normalize(path)
        self._directories.add(normalized)
        self._add_parents(normalized)

    def remove_file(self, path: str) -> None:
        self._files.pop(self._normalize(path), None)

    def exists(self, path: str) -> bool:
        normalized = self._normalize(path)
        return normalized in self._files or normalized in self._directories or normalized in self._unreadable

    def read_bytes(self, path: str) -> bytes:
        normalized = self._normalize(path)
        if normalized in self._unreadable:
            raise PathIOException(f"Permission denied: {path}", details={"path": path})
        if normalized not in self._files:
            raise PathIOException(f"No such file: {path}", details={"path": path})
        return self._files[normalized]

    def _add_parents(self, path: str) -> None:
        parent = posixpath.dirname(path)
        while parent and parent not in self._directories:
            self._directories.add(parent)
            if parent == "/":
                break
            parent = posixpath.dirname(parent)

    @staticmethod
    def _normalize(path: str) -> str:
        return posixpath.normpath(path.replace("\\", "/"))
