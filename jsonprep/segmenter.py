"""Streaming line segmentation for JSON Lines input.

A ``LineSegmenter`` receives text chunks of any size, in order, and hands
back complete, trimmed, non-blank lines as ``LineRecord`` values. Chunk
boundaries may fall anywhere, including inside a ``"\\r\\n"`` pair: the
records produced depend only on the concatenated text, never on how it was
split.

One segmenter serves one stream. ``feed`` and ``flush`` must not be called
concurrently on the same instance.
"""

import logging
from dataclasses import dataclass

from .errors import LineTooLongError, SegmenterClosedError

_logging = logging.getLogger(__name__)

NUMBERING_MODES = ("record", "source")


@dataclass(frozen=True)
class LineRecord:
    """One complete logical line of a stream."""

    line_number: int
    text: str


class LineSegmenter:
    """Reassemble complete lines from arbitrarily split text chunks.

    Example:
        >>> segmenter = LineSegmenter()
        >>> segmenter.feed('{"id":')
        []
        >>> segmenter.feed('1}\\n{"id":2}\\n')
        [LineRecord(line_number=1, text='{"id":1}'), LineRecord(line_number=2, text='{"id":2}')]
        >>> segmenter.flush()
        []
    """

    def __init__(
        self, max_line_length: int | None = None, numbering: str = "record"
    ) -> None:
        """Initialize an empty segmenter.

        Args:
            max_line_length: Reject lines longer than this many characters
                with LineTooLongError. None disables the check.
            numbering: "record" numbers only non-blank lines (blank lines
                consume no number); "source" advances the number for blank
                lines too so numbers match physical lines.

        Raises:
            ValueError: If an option is out of range
        """
        if numbering not in NUMBERING_MODES:
            raise ValueError(
                f"numbering must be one of {', '.join(NUMBERING_MODES)}, got {numbering!r}"
            )
        if max_line_length is not None and max_line_length < 1:
            raise ValueError("max_line_length must be a positive integer")
        self.max_line_length = max_line_length
        self.numbering = numbering
        self._pending = ""
        self._line_counter = 0
        self._closed = False

    @property
    def pending(self) -> str:
        """Buffered text that has not reached a line terminator yet."""
        return self._pending

    @property
    def line_number(self) -> int:
        """Number assigned to the most recent record (0 before the first)."""
        return self._line_counter

    @property
    def closed(self) -> bool:
        return self._closed

    def feed(self, chunk: str) -> list[LineRecord]:
        """Append a chunk and return the records it completes.

        Args:
            chunk: Next piece of the stream, any length

        Returns:
            Records completed by this chunk, in stream order

        Raises:
            SegmenterClosedError: If flush() was already called or an earlier
                feed raised LineTooLongError
            LineTooLongError: If a line exceeds max_line_length; the
                segmenter is closed afterwards
        """
        if self._closed:
            raise SegmenterClosedError("cannot feed a closed segmenter")

        buffered = (self._pending + chunk).replace("\r\n", "\n")
        cut = buffered.rfind("\n")
        if cut == -1:
            self._pending = buffered
            self._check_pending([])
            return []

        complete = buffered[:cut]
        self._pending = buffered[cut + 1 :]

        records: list[LineRecord] = []
        for raw in complete.split("\n"):
            self._check_length(raw, records)
            record = self._next_record(raw)
            if record is not None:
                records.append(record)

        self._check_pending(records)
        if records:
            _logging.debug(
                f"Segmented {len(records)} record(s), last line {self._line_counter}"
            )
        return records

    def flush(self) -> list[LineRecord]:
        """Emit the trailing unterminated line, if any, and close the stream.

        Must be called exactly once, after the last chunk.

        Raises:
            SegmenterClosedError: If flush() was already called
        """
        if self._closed:
            raise SegmenterClosedError("flush() called twice")
        self._closed = True

        text = self._pending.strip()
        self._pending = ""
        if not text:
            return []
        self._line_counter += 1
        return [LineRecord(self._line_counter, text)]

    def _next_record(self, raw: str) -> LineRecord | None:
        text = raw.strip()
        if not text:
            if self.numbering == "source":
                self._line_counter += 1
            return None
        self._line_counter += 1
        return LineRecord(self._line_counter, text)

    def _check_length(self, raw: str, emitted: list[LineRecord]) -> None:
        if self.max_line_length is None or len(raw) <= self.max_line_length:
            return
        self._closed = True
        raise LineTooLongError(
            self._line_counter + 1, len(raw), self.max_line_length, emitted
        )

    def _check_pending(self, emitted: list[LineRecord]) -> None:
        # A trailing "\r" may still pair with a "\n" from the next chunk
        pending = self._pending
        if pending.endswith("\r"):
            pending = pending[:-1]
        self._check_length(pending, emitted)


__all__ = ["LineRecord", "LineSegmenter", "NUMBERING_MODES"]
