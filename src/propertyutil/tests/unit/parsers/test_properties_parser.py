# ABOUTME: Unit tests for the properties-format parser
# ABOUTME: Tests comments, separators, escapes, continuations, encodings and malformed input

import io

import pytest

from propertyutil.exceptions import PropertiesParseException
from propertyutil.parsers import load_properties, parse_properties


class TestSeparators:
    """Key/value separation rules."""

    @pytest.mark.unit
    def test_equals_separator(self):
        assert parse_properties("greeting=hello") == {"greeting": "hello"}

    @pytest.mark.unit
    def test_colon_separator(self):
        assert parse_properties("greeting:hello") == {"greeting": "hello"}

    @pytest.mark.unit
    def test_whitespace_separator(self):
        assert parse_properties("greeting hello world") == {"greeting": "hello world"}

    @pytest.mark.unit
    def test_whitespace_around_separator_is_skipped(self):
        assert parse_properties("greeting   =   hello") == {"greeting": "hello"}
        assert parse_properties("greeting \t: hello") == {"greeting": "hello"}

    @pytest.mark.unit
    def test_only_first_separator_splits(self):
        assert parse_properties("url=http://host:80/a=b") == {"url": "http://host:80/a=b"}

    @pytest.mark.unit
    def test_second_equals_after_equals_is_part_of_value(self):
        assert parse_properties("key==value") == {"key": "=value"}

    @pytest.mark.unit
    def test_key_without_value(self):
        assert parse_properties("flag") == {"flag": ""}
        assert parse_properties("flag=") == {"flag": ""}

    @pytest.mark.unit
    def test_trailing_whitespace_in_value_is_kept(self):
        assert parse_properties("key=value  ") == {"key": "value  "}


class TestCommentsAndBlankLines:
    """Comment and blank line handling."""

    @pytest.mark.unit
    def test_hash_and_bang_comments_are_skipped(self):
        content = "# comment\n! another\n   # indented comment\nkey=value\n"
        assert parse_properties(content) == {"key": "value"}

    @pytest.mark.unit
    def test_blank_lines_are_skipped(self):
        assert parse_properties("\n\n   \n\tkey=value\n\n") == {"key": "value"}

    @pytest.mark.unit
    def test_hash_inside_value_is_not_a_comment(self):
        assert parse_properties("color=#ff0000") == {"color": "#ff0000"}

    @pytest.mark.unit
    def test_comment_ending_with_backslash_does_not_continue(self):
        assert parse_properties("# comment \\\nkey=value") == {"key": "value"}


class TestEscapes:
    """Backslash escape handling."""

    @pytest.mark.unit
    def test_control_character_escapes(self):
        result = parse_properties(r"key=a\tb\nc\rd\fe")
        assert result == {"key": "a\tb\nc\rd\fe"}

    @pytest.mark.unit
    def test_escaped_separators_in_key(self):
        result = parse_properties(r"a\=b\:c\ d=value")
        assert result == {"a=b:c d": "value"}

    @pytest.mark.unit
    def test_escaped_backslash(self):
        assert parse_properties(r"path=C:\\temp") == {"path": "C:\\temp"}

    @pytest.mark.unit
    def test_unicode_escape(self):
        assert parse_properties(r"name=Caf\u00e9") == {"name": "Café"}

    @pytest.mark.unit
    def test_surrogate_pair_escapes_combine(self):
        assert parse_properties(r"smile=\ud83d\ude00") == {"smile": "\U0001F600"}

    @pytest.mark.unit
    def test_unpaired_surrogate_escape_is_kept(self):
        assert parse_properties(r"k=\uD800") == {"k": "\ud800"}
        assert parse_properties(r"k=\ude00x\ud83d\ude00") == {"k": "\ude00x\U0001F600"}

    @pytest.mark.unit
    def test_unknown_escape_stands_for_itself(self):
        assert parse_properties(r"key=\q\#") == {"key": "q#"}

    @pytest.mark.unit
    def test_malformed_unicode_escape_raises(self):
        with pytest.raises(PropertiesParseException) as exc_info:
            parse_properties("ok=1\nbad=\\u12G4\n")

        assert exc_info.value.code == "PROPERTIES_PARSE_ERROR"
        assert exc_info.value.details["line"] == 2

    @pytest.mark.unit
    def test_truncated_unicode_escape_raises(self):
        with pytest.raises(PropertiesParseException):
            parse_properties("bad=\\u12")


class TestContinuations:
    """Line continuation handling."""

    @pytest.mark.unit
    def test_continuation_strips_leading_whitespace(self):
        content = "fruits=apple, \\\n        banana, \\\n        cherry\n"
        assert parse_properties(content) == {"fruits": "apple, banana, cherry"}

    @pytest.mark.unit
    def test_even_backslashes_do_not_continue(self):
        content = "a=x\\\\\nb=y\n"
        assert parse_properties(content) == {"a": "x\\", "b": "y"}

    @pytest.mark.unit
    def test_continuation_at_end_of_input(self):
        assert parse_properties("key=value\\") == {"key": "value"}

    @pytest.mark.unit
    def test_continued_line_starting_with_hash_is_content(self):
        assert parse_properties("key=a\\\n#b") == {"key": "a#b"}

    @pytest.mark.unit
    def test_all_line_endings(self):
        content = "a=1\r\nb=2\rc=3\nd=4"
        assert parse_properties(content) == {"a": "1", "b": "2", "c": "3", "d": "4"}


class TestDecoding:
    """Byte input decoding."""

    @pytest.mark.unit
    def test_bytes_default_to_iso_8859_1(self):
        assert parse_properties(b"name=Caf\xe9") == {"name": "Café"}

    @pytest.mark.unit
    def test_explicit_encoding(self):
        data = "name=Café".encode("utf-8")
        assert parse_properties(data, encoding="utf-8") == {"name": "Café"}

    @pytest.mark.unit
    def test_undecodable_bytes_raise(self):
        with pytest.raises(PropertiesParseException):
            parse_properties(b"name=\xff\xfe\xfd", encoding="utf-8")

    @pytest.mark.unit
    def test_load_properties_reads_stream(self):
        stream = io.BytesIO(b"# header\nk=v\n")
        assert load_properties(stream) == {"k": "v"}


class TestDuplicates:
    """Duplicate key handling."""

    @pytest.mark.unit
    def test_last_duplicate_wins(self):
        assert parse_properties("k=first\nk=second\n") == {"k": "second"}

    @pytest.mark.unit
    def test_empty_content(self):
        assert parse_properties("") == {}
        assert parse_properties(b"") == {}
