# ABOUTME: Abstract file system interface used to probe and read bundle files
# ABOUTME: Limits file access to an existence check and a whole-file read

from abc import ABC, abstractmethod


class AbstractFileSystem(ABC):
    """
    [L0] Abstract base class for the file system primitives the bundle loader needs.

    Probes are bounded to "exists?" and "open + read to EOF" so that loading a
    bundle can never hang on retries.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether ``path`` exists.

        Returns:
            bool: True if a file or directory exists at ``path``. Malformed
            paths report False.
        """
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """
        Read the whole file at ``path``.

        Returns:
            bytes: The file content.

        Raises:
            PathIOException: If the file cannot be opened or read.
        """
        pass
