"""JSON Lines (JSONL/NDJSON) support.

Each non-blank line of the input is an independent JSON value. Both a batch
API (whole text in, list out) and streaming APIs (chunks in, values out) are
provided; all of them share ``LineSegmenter`` so a given text decodes the
same way regardless of how it arrives.

Decoding is fail-fast: the first record that does not decode raises
``JsonLinesParseError`` and no later record is processed. The error carries
the record's line number as assigned by the segmenter.
"""

import codecs
import logging
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from .api import apply_validator
from .codec import JsonCodec
from .errors import JsonLinesParseError, ParseError
from .segmenter import LineRecord, LineSegmenter

_logging = logging.getLogger(__name__)

_codec = JsonCodec()


def decode_record(record: LineRecord, codec: JsonCodec = _codec) -> Any:
    """Decode a single segmented record.

    Raises:
        JsonLinesParseError: Carrying the record's line number and the
            column within the record
    """
    try:
        return codec.decode(record.text)
    except ParseError as e:
        raise JsonLinesParseError(
            e.message,
            record.line_number,
            column=e.column,
            snippet=e.snippet,
            offset=e.offset,
        ) from e


def parse_json_lines(
    text: str | bytes,
    validator: Callable[[Any], Any] | None = None,
    numbering: str = "record",
) -> list[Any]:
    """Parse a complete JSON Lines document into a list of values.

    Blank lines are skipped.

    Examples:
        >>> parse_json_lines('{"id":1}\\n\\n{"id":2}\\n')
        [{'id': 1}, {'id': 2}]
    """
    return list(iter_json_lines([text], validator=validator, numbering=numbering))


def iter_records(
    chunks: Iterable[str | bytes],
    max_line_length: int | None = None,
    numbering: str = "record",
) -> Iterator[LineRecord]:
    """Segment a chunk stream into records without decoding them.

    ``bytes`` chunks are decoded as UTF-8 incrementally, so a multi-byte
    character split between two chunks is reassembled.
    """
    segmenter = LineSegmenter(max_line_length=max_line_length, numbering=numbering)
    decoder = codecs.getincrementaldecoder("utf-8")()
    for chunk in chunks:
        yield from segmenter.feed(_chunk_text(chunk, decoder))
    yield from segmenter.feed(_chunk_text(b"", decoder, final=True))
    yield from segmenter.flush()
    _logging.debug(f"Stream finished after {segmenter.line_number} record(s)")


def iter_json_lines(
    chunks: Iterable[str | bytes],
    validator: Callable[[Any], Any] | None = None,
    max_line_length: int | None = None,
    numbering: str = "record",
) -> Iterator[Any]:
    """Decode a stream of chunks into a stream of values.

    Args:
        chunks: Text or UTF-8 byte pieces, split anywhere
        validator: Optional per-value validator (see ``jsonprep.parse``)
        max_line_length: Reject longer lines with LineTooLongError
        numbering: "record" or "source" line numbering

    Raises:
        JsonLinesParseError: On the first record that does not decode
        ValidationError: On the first value the validator rejects
    """
    for record in iter_records(chunks, max_line_length, numbering):
        yield apply_validator(decode_record(record), validator)


async def aiter_records(
    chunks: AsyncIterable[str | bytes],
    max_line_length: int | None = None,
    numbering: str = "record",
) -> AsyncIterator[LineRecord]:
    """Async counterpart of ``iter_records``."""
    segmenter = LineSegmenter(max_line_length=max_line_length, numbering=numbering)
    decoder = codecs.getincrementaldecoder("utf-8")()
    async for chunk in chunks:
        for record in segmenter.feed(_chunk_text(chunk, decoder)):
            yield record
    for record in segmenter.feed(_chunk_text(b"", decoder, final=True)):
        yield record
    for record in segmenter.flush():
        yield record


async def aiter_json_lines(
    chunks: AsyncIterable[str | bytes],
    validator: Callable[[Any], Any] | None = None,
    max_line_length: int | None = None,
    numbering: str = "record",
) -> AsyncIterator[Any]:
    """Async counterpart of ``iter_json_lines`` for asyncio chunk sources."""
    async for record in aiter_records(chunks, max_line_length, numbering):
        yield apply_validator(decode_record(record), validator)


def stringify_json_lines(values: Iterable[Any]) -> str:
    """Encode values as JSON Lines text.

    Each value becomes one compact line followed by ``"\\n"``; no values
    give an empty string.

    Raises:
        StringifyError: If any value cannot be encoded
    """
    return "".join(iter_stringify_json_lines(values))


def iter_stringify_json_lines(values: Iterable[Any]) -> Iterator[str]:
    """Yield one ``"<json>\\n"`` string per value."""
    for value in values:
        yield _codec.encode(value) + "\n"


def _chunk_text(
    chunk: str | bytes, decoder: codecs.IncrementalDecoder, final: bool = False
) -> str:
    if isinstance(chunk, str):
        if decoder.getstate()[0]:
            # text cannot complete a multi-byte sequence left by a bytes chunk
            raise ParseError(
                "Invalid UTF-8 in stream: incomplete sequence before text chunk"
            )
        return chunk
    try:
        return decoder.decode(chunk, final=final)
    except UnicodeDecodeError as e:
        raise ParseError(f"Invalid UTF-8 in stream: {e.reason}") from e


__all__ = [
    "decode_record",
    "parse_json_lines",
    "iter_records",
    "iter_json_lines",
    "aiter_records",
    "aiter_json_lines",
    "stringify_json_lines",
    "iter_stringify_json_lines",
]
