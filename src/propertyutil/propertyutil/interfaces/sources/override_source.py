# ABOUTME: Abstract override source interface for process-level property overrides
# ABOUTME: Defines the highest-precedence key to value lookup supplied by the host

from abc import ABC, abstractmethod


class AbstractOverrideSource(ABC):
    """
    [L0] Abstract base class for process-level property overrides.

    An override source is consulted before any property file, so operators can
    force a value at launch without editing files. The typical binding is the
    table of ``-Dkey=value`` arguments supplied on the command line.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Look up an override for a property key.

        Args:
            key (str): The property key.

        Returns:
            str | None: The override value, or None when the source does not
            define the key. An empty string is a defined value.
        """
        pass
