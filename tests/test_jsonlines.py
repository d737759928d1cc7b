"""Tests for JSON Lines batch and streaming APIs."""

import pytest

from jsonprep import (
    JsonLinesParseError,
    LineTooLongError,
    ParseError,
    ValidationError,
    aiter_json_lines,
    aiter_records,
    iter_json_lines,
    iter_records,
    iter_stringify_json_lines,
    parse_json_lines,
    stringify_json_lines,
)
from jsonprep.segmenter import LineRecord
from tests.conftest import all_two_way_splits


async def _async_chunks(chunks):
    for chunk in chunks:
        yield chunk


class TestParseJsonLines:
    """Tests for batch parsing."""

    def test_blank_lines_skipped(self):
        text = '{"id":1}\n\n  \n{"id":2}\n'
        assert parse_json_lines(text) == [{"id": 1}, {"id": 2}]

    def test_empty_input(self):
        assert parse_json_lines("") == []
        assert parse_json_lines("\n \n") == []

    def test_unterminated_last_line(self):
        assert parse_json_lines('1\n"two"') == [1, "two"]

    def test_bytes_input(self):
        assert parse_json_lines(b'{"a":"\xc3\xa9"}\n') == [{"a": "é"}]

    def test_error_carries_record_number(self):
        """Blank lines do not count toward the reported record number."""
        with pytest.raises(JsonLinesParseError) as exc_info:
            parse_json_lines('{"a":1}\n\n{"a":}\n')
        error = exc_info.value
        assert error.line_number == 2
        assert error.line == 1
        assert error.column == 6
        assert error.message.startswith("Line 2:")
        assert error.snippet == '{"a":}\n     ^'

    def test_error_with_source_numbering(self):
        with pytest.raises(JsonLinesParseError) as exc_info:
            parse_json_lines('{"a":1}\n\n{"a":}\n', numbering="source")
        assert exc_info.value.line_number == 3

    def test_json_lines_error_is_a_parse_error(self):
        with pytest.raises(ParseError):
            parse_json_lines("nope\n")

    def test_validator_applied_per_record(self):
        assert parse_json_lines("1\n2\n", validator=lambda v: v * 10) == [10, 20]

    def test_validator_rejection(self):
        def only_objects(value):
            if not isinstance(value, dict):
                raise TypeError("record must be an object")
            return value

        with pytest.raises(ValidationError):
            parse_json_lines('{"a":1}\n[1]\n', validator=only_objects)


class TestIterJsonLines:
    """Tests for synchronous streaming."""

    def test_chunks_split_inside_records(self):
        chunks = ['{"id":', '1}\n{"id":2}\n']
        assert list(iter_json_lines(chunks)) == [{"id": 1}, {"id": 2}]

    def test_fail_fast(self):
        """Values before the bad record are produced, nothing after it."""
        stream = iter_json_lines(['{"a":1}\n', "bad\n", '{"b":2}\n'])
        assert next(stream) == {"a": 1}
        with pytest.raises(JsonLinesParseError) as exc_info:
            next(stream)
        assert exc_info.value.line_number == 2

    def test_multibyte_character_split_between_byte_chunks(self):
        data = '{"n":"é☃"}\n'.encode("utf-8")
        for chunks in all_two_way_splits(data):
            assert list(iter_json_lines(chunks)) == [{"n": "é☃"}]

    def test_truncated_utf8_at_end(self):
        with pytest.raises(ParseError, match="Invalid UTF-8"):
            list(iter_json_lines([b'{"n":1}\n', b"\xc3"]))

    def test_text_chunk_after_partial_byte_sequence(self):
        """A text chunk cannot finish a character begun in a bytes chunk."""
        with pytest.raises(ParseError, match="incomplete sequence"):
            list(iter_json_lines([b'"\xc3', 'x"\n', b"\xa9"]))

    def test_mixed_chunks_on_character_boundaries(self):
        chunks = [b'{"n":', '"é"', "}\n".encode("utf-8")]
        assert list(iter_json_lines(chunks)) == [{"n": "é"}]

    def test_line_length_limit(self):
        with pytest.raises(LineTooLongError):
            list(iter_json_lines(['[1]\n[1,2,3,4]\n'], max_line_length=5))

    def test_records_match_regardless_of_split(self):
        text = '{"a":1}\r\n\r\n{"b":"x\\ny"}\r\n[true]'
        expected = list(iter_records([text]))
        assert expected == [
            LineRecord(1, '{"a":1}'),
            LineRecord(2, '{"b":"x\\ny"}'),
            LineRecord(3, "[true]"),
        ]
        for chunks in all_two_way_splits(text):
            assert list(iter_records(chunks)) == expected


class TestAsyncJsonLines:
    """Tests for asyncio streaming."""

    @pytest.mark.asyncio
    async def test_values(self):
        chunks = _async_chunks(['{"id":', '1}\n\n{"id":2}'])
        values = [value async for value in aiter_json_lines(chunks)]
        assert values == [{"id": 1}, {"id": 2}]

    @pytest.mark.asyncio
    async def test_byte_chunks(self):
        chunks = _async_chunks([b'{"n":"\xc3', b'\xa9"}\n'])
        values = [value async for value in aiter_json_lines(chunks)]
        assert values == [{"n": "é"}]

    @pytest.mark.asyncio
    async def test_records(self):
        chunks = _async_chunks(["a\n", "\n", "b"])
        records = [record async for record in aiter_records(chunks)]
        assert records == [LineRecord(1, "a"), LineRecord(2, "b")]

    @pytest.mark.asyncio
    async def test_fail_fast(self):
        chunks = _async_chunks(["1\n", "{\n", "3\n"])
        seen = []
        with pytest.raises(JsonLinesParseError) as exc_info:
            async for value in aiter_json_lines(chunks):
                seen.append(value)
        assert seen == [1]
        assert exc_info.value.line_number == 2


class TestStringifyJsonLines:
    """Tests for JSON Lines output."""

    def test_one_value_per_line(self):
        assert stringify_json_lines([{"a": 1}, [1, 2], "x"]) == '{"a":1}\n[1,2]\n"x"\n'

    def test_empty(self):
        assert stringify_json_lines([]) == ""

    def test_embedded_newlines_escaped(self):
        assert stringify_json_lines(["a\nb"]) == '"a\\nb"\n'

    def test_iter_stringify(self):
        assert list(iter_stringify_json_lines([1, None])) == ["1\n", "null\n"]

    def test_output_parses_back(self):
        values = [{"id": 1}, {"id": 2, "tags": ["x"]}]
        assert parse_json_lines(stringify_json_lines(values)) == values
