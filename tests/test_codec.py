"""Tests for the codec, backends and convenience API."""

import pytest

from jsonprep import (
    Backend,
    ParseError,
    StringifyError,
    UnknownBackendError,
    UnterminatedCommentError,
    ValidationError,
    get_backend,
    json_backend,
    jsonc_backend,
    parse,
    parse_jsonc,
    stringify,
    stringify_jsonc,
)
from jsonprep.codec import JsonCodec, to_text


class TestParse:
    """Tests for parse() and parse_jsonc()."""

    def test_plain_json(self):
        assert parse('{"id": 1, "name": "Paul"}') == {"id": 1, "name": "Paul"}

    def test_comments_enabled(self):
        text = '{"id": 1, // comment\n"name": "Paul"}'
        assert parse(text, comments=True) == {"id": 1, "name": "Paul"}
        assert parse_jsonc(text) == {"id": 1, "name": "Paul"}

    def test_comments_rejected_by_plain_parse(self):
        with pytest.raises(ParseError):
            parse('{"id": 1 /* c */}')

    def test_syntax_error_location(self):
        """The error points at the first invalid character."""
        with pytest.raises(ParseError) as exc_info:
            parse('{"id": 1, invalid}')
        error = exc_info.value
        assert error.line == 1
        assert error.column == 11
        assert error.offset == 10
        assert error.snippet == '{"id": 1, invalid}\n' + " " * 10 + "^"
        assert "double quotes" in error.message

    def test_jsonc_error_keeps_line_numbers(self):
        """Stripping comments does not shift reported lines."""
        text = '{\n  // note\n  "a": ,\n}'
        with pytest.raises(ParseError) as exc_info:
            parse_jsonc(text)
        assert exc_info.value.line == 3
        assert exc_info.value.column == 8
        assert exc_info.value.snippet.startswith('  "a": ,\n')

    def test_error_message_includes_snippet(self):
        with pytest.raises(ParseError) as exc_info:
            parse("[1, 2")
        assert "^" in str(exc_info.value)
        assert "line 1" in str(exc_info.value)

    def test_bytes_input(self):
        assert parse(b'{"a": "\xc3\xa9"}') == {"a": "é"}

    def test_invalid_utf8(self):
        with pytest.raises(ParseError) as exc_info:
            parse(b'{"a": "\xff"}')
        assert exc_info.value.message.startswith("Invalid UTF-8")
        assert exc_info.value.column == 8

    def test_empty_input(self):
        with pytest.raises(ParseError) as exc_info:
            parse("")
        assert (exc_info.value.line, exc_info.value.column) == (1, 1)

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(self, constant):
        """Python's json extensions are not accepted as JSON."""
        with pytest.raises(ParseError) as exc_info:
            parse(f'{{"a": "NaN", "b": {constant}}}')
        assert exc_info.value.message == f"{constant} is not valid JSON"
        assert exc_info.value.column == 19


class TestValidator:
    """Tests for the optional validator hook."""

    def test_validator_result_returned(self):
        assert parse('{"a": 1}', validator=lambda value: value["a"]) == 1

    def test_validator_rejection(self):
        def positive(value):
            if value < 0:
                raise ValueError("must be positive")
            return value

        with pytest.raises(ValidationError, match="must be positive") as exc_info:
            parse("-3", validator=positive)
        assert exc_info.value.value == -3


class TestStringify:
    """Tests for stringify()."""

    def test_compact_by_default(self):
        assert stringify({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_indent(self):
        assert stringify({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_non_ascii_kept(self):
        assert stringify("é") == '"é"'

    def test_jsonc_output_is_plain_json(self):
        assert stringify_jsonc({"a": 1}) == stringify({"a": 1})

    def test_cycle(self):
        value = []
        value.append(value)
        with pytest.raises(StringifyError) as exc_info:
            stringify(value)
        assert exc_info.value.reason == "cycle"

    def test_unsupported_type(self):
        with pytest.raises(StringifyError) as exc_info:
            stringify({"a": object()})
        assert exc_info.value.reason == "type_error"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_float(self, value):
        with pytest.raises(StringifyError) as exc_info:
            stringify([value])
        assert exc_info.value.reason == "type_error"


class TestBackends:
    """Tests for backend lookup and configuration."""

    def test_lookup(self):
        assert get_backend("json") is json_backend
        assert get_backend("jsonc") is jsonc_backend

    def test_unknown_backend(self):
        with pytest.raises(UnknownBackendError, match="superjson"):
            get_backend("superjson")

    def test_prepare_only_strips_for_jsonc(self):
        text = "[1, // c\n2]"
        assert json_backend.prepare(text) == text
        assert jsonc_backend.prepare(text) == "[1, \n2]"

    def test_strict_comments_backend(self):
        backend = Backend("jsonc", strip_comments=True, strict_comments=True)
        with pytest.raises(UnterminatedCommentError):
            backend.parse("{} /* never closed")

    def test_permissive_backend_accepts_open_comment(self):
        assert jsonc_backend.parse("{} /* never closed") == {}


class TestCodec:
    """Tests for the codec collaborator on its own."""

    def test_round_trip(self):
        codec = JsonCodec()
        value = {"list": [1, 2.5, None, True], "text": "a\nb"}
        assert codec.decode(codec.encode(value)) == value

    def test_to_text(self):
        assert to_text("abc") == "abc"
        assert to_text(b"abc") == "abc"
        assert to_text(bytearray(b"abc")) == "abc"
