# ABOUTME: Parser for the line-oriented key=value properties file format
# ABOUTME: Pure functions that turn bytes or text into a key to value dictionary

"""
Properties format parser.

Implements the de-facto ``.properties`` format:

- ISO-8859-1 input unless another encoding is given
- ``#`` and ``!`` comment lines
- key/value separated by the first unescaped ``=``, ``:`` or whitespace run
- backslash escapes, including ``\\uXXXX``
- backslash line continuations
- last duplicate key wins
"""

import re
from typing import BinaryIO, Dict, Iterator, List, Tuple

from propertyutil.exceptions import PropertiesParseException

DEFAULT_ENCODING = "iso-8859-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(data: bytes | str, encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """
    Parse properties content into a dictionary.

    Args:
        data: Raw file content. Bytes are decoded with ``encoding``.
        encoding: Character encoding used when ``data`` is bytes.

    Returns:
        Mapping of keys to values, in file order, last duplicate winning.

    Raises:
        PropertiesParseException: If the content cannot be decoded or contains
            a malformed ``\\uXXXX`` escape.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise PropertiesParseException(
                f"Could not decode properties content as {encoding}", details={"encoding": encoding}
            ) from e
    else:
        text = data

    result: Dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        try:
            key = _unescape(raw_key)
            value = _unescape(raw_value)
        except PropertiesParseException as e:
            e.details["line"] = line_number
            raise
        result[key] = value
    return result


def load_properties(stream: BinaryIO, encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """Read a binary stream to EOF and parse it as properties content."""
    return parse_properties(stream.read(), encoding)


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(first_line_number, logical_line)`` with comments and continuations handled."""
    pending: str | None = None
    start = 0
    for number, physical in enumerate(_LINE_BREAK.split(text), start=1):
        stripped = physical.lstrip(_WHITESPACE)
        if pending is None:
            if not stripped or stripped[0] in _COMMENT_MARKERS:
                continue
            line = stripped
            start = number
        else:
            line = pending + stripped

        if _is_continued(line):
            pending = line[:-1]
            continue

        pending = None
        yield start, line

    if pending is not None:
        yield start, pending


def _is_continued(line: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    length = len(line)
    index = 0
    has_separator = False
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS:
            has_separator = True
            break
        if char in _WHITESPACE:
            break
        index += 1

    key_end = min(index, length)
    value_start = key_end
    if has_separator:
        value_start += 1
    else:
        while value_start < length and line[value_start] in _WHITESPACE:
            value_start += 1
        if value_start < length and line[value_start] in _SEPARATORS:
            value_start += 1
    while value_start < length and line[value_start] in _WHITESPACE:
        value_start += 1

    return line[:key_end], line[value_start:]


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    chars: List[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= length:
            break

        char = text[index]
        index += 1
        if char == "u":
            digits = text[index : index + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                raise PropertiesParseException("Malformed \\uxxxx encoding.", details={"escape": "\\u" + digits})
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_SIMPLE_ESCAPES.get(char, char))

    result = "".join(chars)
    if any("\ud800" <= c <= "\udfff" for c in result):
        # Pair up UTF-16 surrogates written as two \u escapes; unpaired ones are kept as is
        result = result.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")
    return result
