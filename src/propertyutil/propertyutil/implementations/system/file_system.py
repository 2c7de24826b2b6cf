# ABOUTME: Local file system implementation of AbstractFileSystem
# ABOUTME: Wraps OS errors and malformed paths in PathIOException

import os
from pathlib import Path

from propertyutil.exceptions import PathIOException
from propertyutil.interfaces.sources import AbstractFileSystem


class LocalFileSystem(AbstractFileSystem):
    """File system primitives over the host's real file system."""

    def exists(self, path: str) -> bool:
        try:
            return os.path.exists(path)
        except (OSError, ValueError):
            return False

    def read_bytes(self, path: str) -> bytes:
        try:
            return Path(path).read_bytes()
        except (OSError, ValueError) as e:
            raise PathIOException(f"Could not read {path}: {e}", details={"path": path}) from e
