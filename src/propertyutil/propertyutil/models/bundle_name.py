# ABOUTME: Bundle name handling: validation, file naming and locale candidates
# ABOUTME: Maps a dotted bundle name such as foo.bar.baz to foo/bar/baz.properties

"""
Bundle name conventions.

A bundle name is a dotted identifier. All but the last segment name
subdirectories and the last segment is the file stem, so ``foo.bar.baz``
lives at ``foo/bar/baz.properties`` below a base directory.

Locale variants follow the properties-bundle convention: for the locale
``en_US`` the candidates are ``baz``, ``baz_en`` and ``baz_en_US``, ordered
from least to most specific. No other bundle name is ever tried.
"""

import locale as _locale
import re
from typing import List, Tuple

from propertyutil.exceptions import ValidationException

PROPERTIES_SUFFIX = ".properties"

_LOCALE_SPLIT = re.compile(r"[_-]")
_NO_LOCALE = frozenset({"", "C", "POSIX"})


def validate_bundle_name(bundle_name: object) -> str:
    """
    Check that ``bundle_name`` is a usable dotted bundle name.

    Raises:
        ValidationException: If the name is missing, not a string, empty, or
            has an empty dotted segment.
    """
    if bundle_name is None:
        raise ValidationException("Property bundle name cannot be None", code="INVALID_BUNDLE_NAME")
    if not isinstance(bundle_name, str):
        raise ValidationException(
            "Property bundle name must be a string",
            code="INVALID_BUNDLE_NAME",
            details={"type": type(bundle_name).__name__},
        )
    if not bundle_name.strip():
        raise ValidationException("Property bundle name cannot be empty", code="INVALID_BUNDLE_NAME")
    if any(not segment for segment in bundle_name.split(".")):
        raise ValidationException(
            f"Property bundle name has an empty segment: {bundle_name!r}",
            code="INVALID_BUNDLE_NAME",
            details={"bundle_name": bundle_name},
        )
    return bundle_name


def split_bundle_name(bundle_name: str) -> Tuple[Tuple[str, ...], str]:
    """Split ``a.b.c`` into ``(("a", "b"), "c")``."""
    *directories, stem = bundle_name.split(".")
    return tuple(directories), stem


def normalize_locale(value: str | None) -> str | None:
    """
    Normalize a locale identifier to ``lang`` or ``lang_REGION``.

    Accepts POSIX (``en_US.UTF-8``, ``de_DE@euro``) and BCP 47 (``en-US``)
    spellings. ``C``, ``POSIX`` and empty values mean "no locale".
    """
    if value is None:
        return None

    value = value.split(".", 1)[0].split("@", 1)[0].strip()
    if value.upper() in _NO_LOCALE:
        return None

    parts = [part for part in _LOCALE_SPLIT.split(value) if part]
    if not parts:
        return None

    language = parts[0].lower()
    if len(parts) == 1:
        return language
    return f"{language}_{parts[1].upper()}"


def default_locale() -> str | None:
    """Return the process locale normalized with ``normalize_locale``."""
    try:
        language, _ = _locale.getlocale()
    except ValueError:
        return None
    return normalize_locale(language)


def locale_suffixes(locale: str | None) -> List[str]:
    """
    Return file stem suffixes from least to most specific.

    >>> locale_suffixes("en_US")
    ['', '_en', '_en_US']
    """
    normalized = normalize_locale(locale)
    suffixes = [""]
    if normalized is None:
        return suffixes

    language, _, region = normalized.partition("_")
    suffixes.append(f"_{language}")
    if region:
        suffixes.append(f"_{language}_{region}")
    return suffixes


def candidate_paths(bundle_name: str, locale: str | None = None) -> List[Tuple[str, ...]]:
    """
    Return relative file paths for a bundle, as path segments, least specific first.

    >>> candidate_paths("foo.bar.baz", "en")
    [('foo', 'bar', 'baz.properties'), ('foo', 'bar', 'baz_en.properties')]
    """
    directories, stem = split_bundle_name(bundle_name)
    return [(*directories, f"{stem}{suffix}{PROPERTIES_SUFFIX}") for suffix in locale_suffixes(locale)]
