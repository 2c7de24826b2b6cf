# ABOUTME: Override source backed by process environment variables
# ABOUTME: Maps dotted property keys to environment variable names with an optional prefix

import os
import re
from typing import List, Mapping

from propertyutil.interfaces.sources import AbstractOverrideSource

_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Za-z]")


class EnvironmentOverrideSource(AbstractOverrideSource):
    """
    Override source reading environment variables.

    For the key ``db.url`` and prefix ``APP_`` the variables ``APP_db.url`` and
    ``APP_DB_URL`` are tried in that order.

    Args:
        prefix: Prepended to every variable name.
        environ: Mapping to read from. Defaults to the live ``os.environ``.
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None):
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def variable_names(self, key: str) -> List[str]:
        exact = f"{self.prefix}{key}"
        mapped = f"{self.prefix}{_NON_ALPHANUMERIC.sub('_', key).upper()}"
        return [exact] if mapped == exact else [exact, mapped]

    def get(self, key: str) -> str | None:
        for name in self.variable_names(key):
            value = self._environ.get(name)
            if value is not None:
                return value
        return None
