# ABOUTME: Resolved property bundle model and bundle source enumeration
# ABOUTME: A ResolvedBundle is an immutable key to value mapping loaded from one source

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, KeysView, Mapping


class BundleSource(str, Enum):
    """
    Where a property bundle was loaded from.
    """

    WORKING_DIRECTORY = "working_directory"
    USER_HOME = "user_home"
    PACKAGED = "packaged"


@dataclass(frozen=True)
class ResolvedBundle:
    """
    [L0] An immutable collection of string properties loaded from a single source.

    The entries are copied on construction and exposed through a read-only
    mapping, so neither the caller that built the bundle nor any reader can
    mutate it afterwards.

    Attributes:
        name: The dotted bundle name that was resolved.
        source: Which lookup step produced the bundle.
        entries: Read-only key to value mapping.
        location: The file or resolver the entries came from, if known.
    """

    name: str
    source: BundleSource
    entries: Mapping[str, str] = field(default_factory=dict)
    location: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> str | None:
        """Return the value for ``key`` or None when the bundle does not define it."""
        return self.entries.get(key)

    def keys(self) -> KeysView[str]:
        return self.entries.keys()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)
