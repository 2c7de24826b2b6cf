# ABOUTME: Process-wide system properties table and the override source reading it
# ABOUTME: Hosts populate the table from -Dkey=value launch arguments or programmatically

import threading
from typing import Dict, Iterable, List, Mapping

from propertyutil.interfaces.sources import AbstractOverrideSource

_ARGUMENT_PREFIX = "-D"


class SystemProperties:
    """
    Thread-safe, process-wide table of string properties.

    This is the default override source of the library: values set here take
    precedence over every property file. The well-known keys ``user.dir`` and
    ``user.home`` also redirect the base directories searched for bundles.

    Example:
        >>> props = SystemProperties()
        >>> props.load_arguments(["-Ddb.url=sqlite://", "serve"])
        ['serve']
        >>> props.get("db.url")
        'sqlite://'
    """

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._properties: Dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def get(self, key: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._properties.get(key, default)

    def set(self, key: str, value: str) -> str | None:
        """
        Set a property and return its previous value.

        Raises:
            ValueError: If key is empty or value is None.
        """
        if not key:
            raise ValueError("Property key cannot be empty")
        if value is None:
            raise ValueError("Property value cannot be None")
        with self._lock:
            previous = self._properties.get(key)
            self._properties[key] = value
            return previous

    def remove(self, key: str) -> str | None:
        """Remove a property and return its previous value."""
        with self._lock:
            return self._properties.pop(key, None)

    def update(self, properties: Mapping[str, str]) -> None:
        with self._lock:
            for key, value in properties.items():
                self.set(key, value)

    def clear(self) -> None:
        with self._lock:
            self._properties.clear()

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the current properties."""
        with self._lock:
            return dict(self._properties)

    def load_arguments(self, arguments: Iterable[str]) -> List[str]:
        """
        Consume ``-Dkey=value`` and ``-Dkey`` arguments.

        ``-Dkey`` sets the key to the empty string. Arguments that are not
        property definitions are returned in their original order.

        Args:
            arguments: Command line arguments, typically ``sys.argv[1:]``.

        Returns:
            The arguments that were not consumed.
        """
        remaining: List[str] = []
        for argument in arguments:
            if argument.startswith(_ARGUMENT_PREFIX):
                key, _, value = argument[len(_ARGUMENT_PREFIX) :].partition("=")
                if key:
                    self.set(key, value)
                    continue
            remaining.append(argument)
        return remaining

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._properties

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)


# The process-wide table consulted by default.
system_properties = SystemProperties()


class SystemPropertiesOverrideSource(AbstractOverrideSource):
    """Override source reading a SystemProperties table, the process-wide one by default."""

    def __init__(self, properties: SystemProperties | None = None):
        self._properties = properties if properties is not None else system_properties

    def get(self, key: str) -> str | None:
        return self._properties.get(key)
