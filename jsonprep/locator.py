"""Offset to line/column conversion for diagnostics."""

import re
from dataclasses import dataclass

# Codec messages that carry an offset: stdlib json "(char 10)", V8 "position 10"
_OFFSET_PATTERNS = [re.compile(r"\(char (\d+)\)"), re.compile(r"position (\d+)")]


@dataclass(frozen=True)
class DiagnosticLocation:
    """Human-readable position of an offset within a text."""

    line: int
    column: int
    snippet: str


def locate(text: str, offset: int) -> DiagnosticLocation:
    """Convert a zero-based character offset into a diagnostic location.

    The snippet is the source line containing the offset, followed by a
    caret line pointing at the column. Offsets past the end of ``text`` map
    to just after the last character of the last line; negative offsets are
    treated as 0.

    Args:
        text: The text the offset refers to
        offset: Zero-based character offset

    Returns:
        DiagnosticLocation with 1-based line and column

    Examples:
        >>> loc = locate('{"id": 1, invalid}', 10)
        >>> (loc.line, loc.column)
        (1, 11)
    """
    offset = max(offset, 0)
    lines = text.split("\n")
    start = 0

    for index, line in enumerate(lines):
        end = start + len(line) + 1
        if end > offset:
            column = offset - start + 1
            return DiagnosticLocation(index + 1, column, _snippet(line, column))
        start = end

    last = lines[-1]
    column = len(last) + 1
    return DiagnosticLocation(len(lines), column, _snippet(last, column))


def build_snippet(text: str, offset: int) -> str:
    """Return only the two-line snippet for ``offset`` in ``text``."""
    return locate(text, offset).snippet


def extract_offset(error: BaseException) -> int:
    """Pull an approximate character offset out of a codec error.

    Uses the ``pos`` attribute of ``json.JSONDecodeError`` when available,
    then falls back to scanning the message. Returns 0 if nothing matches.
    """
    pos = getattr(error, "pos", None)
    if isinstance(pos, int):
        return pos

    message = str(error)
    for pattern in _OFFSET_PATTERNS:
        match = pattern.search(message)
        if match:
            return int(match.group(1))
    return 0


def _snippet(line: str, column: int) -> str:
    caret = " " * (column - 1) + "^"
    return f"{line}\n{caret}"


__all__ = ["DiagnosticLocation", "locate", "build_snippet", "extract_offset"]
