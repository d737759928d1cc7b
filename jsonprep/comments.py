"""Comment stripping for JSONC text.

This module turns JSON with ``//`` and ``/* */`` comments into plain JSON
that any standard codec accepts.

The state machine approach ensures that:
- Comment markers inside string literals are left alone
- Escaped quotes don't end strings
- Every newline survives, so line numbers in the output match the input
"""

from enum import Enum

from .errors import UnterminatedCommentError
from .locator import locate


class ScanState(Enum):
    """Scanner position relative to strings and comments."""

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


class CommentStripper:
    """State machine for removing comments from JSONC text.

    Comments are removed entirely (not padded), while newlines inside or at
    the end of a comment are kept at their relative position.

    Example:
        >>> stripper = CommentStripper()
        >>> stripper.strip('{"id": 1, // comment\\n"name": "Paul"}')
        '{"id": 1, \\n"name": "Paul"}'
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize the stripper.

        Args:
            strict: Raise UnterminatedCommentError when the input ends inside
                a block comment instead of dropping the remainder
        """
        self.strict = strict
        self.state: ScanState = ScanState.NORMAL
        self.escape_next: bool = False
        self._comment_start: int = -1

    def strip(self, text: str) -> str:
        """Remove all comments from ``text``.

        Args:
            text: Complete JSONC document

        Returns:
            Text without comments and with the same number of newlines

        Raises:
            UnterminatedCommentError: In strict mode, if a block comment is
                still open at end of input
        """
        result: list[str] = []
        i = 0
        n = len(text)
        self.state = ScanState.NORMAL
        self.escape_next = False
        self._comment_start = -1

        while i < n:
            char = text[i]

            if self.state is ScanState.IN_STRING:
                i = self._process_string_state(char, result, i)
            elif self.state is ScanState.IN_LINE_COMMENT:
                i = self._process_line_comment_state(char, result, i)
            elif self.state is ScanState.IN_BLOCK_COMMENT:
                i = self._process_block_comment_state(char, result, text, i, n)
            else:
                i = self._process_normal_state(char, result, text, i, n)

        self._handle_end_state(text)

        return "".join(result)

    def _process_normal_state(
        self, char: str, result: list[str], text: str, i: int, n: int
    ) -> int:
        """Handle character in NORMAL state.

        Returns:
            Updated index after processing
        """
        next_char = text[i + 1] if i + 1 < n else ""
        if char == '"':
            result.append(char)
            self.state = ScanState.IN_STRING
        elif char == "/" and next_char == "/":
            self.state = ScanState.IN_LINE_COMMENT
            return i + 2
        elif char == "/" and next_char == "*":
            self.state = ScanState.IN_BLOCK_COMMENT
            self._comment_start = i
            return i + 2
        else:
            result.append(char)
        return i + 1

    def _process_string_state(self, char: str, result: list[str], i: int) -> int:
        """Handle character in IN_STRING state.

        A backslash swallows the special meaning of the character after it,
        so an escaped quote does not close the string.
        """
        result.append(char)
        if self.escape_next:
            self.escape_next = False
        elif char == "\\":
            self.escape_next = True
        elif char == '"':
            self.state = ScanState.NORMAL
        return i + 1

    def _process_line_comment_state(self, char: str, result: list[str], i: int) -> int:
        """Handle character in IN_LINE_COMMENT state.

        Drop everything until newline; the newline itself is kept.
        """
        if char == "\n":
            result.append(char)
            self.state = ScanState.NORMAL
        return i + 1

    def _process_block_comment_state(
        self, char: str, result: list[str], text: str, i: int, n: int
    ) -> int:
        """Handle character in IN_BLOCK_COMMENT state."""
        if char == "*" and i + 1 < n and text[i + 1] == "/":
            self.state = ScanState.NORMAL
            self._comment_start = -1
            return i + 2
        if char == "\n":
            result.append(char)
        return i + 1

    def _handle_end_state(self, text: str) -> None:
        """Handle edge case: input ends while a block comment is open."""
        if self.state is ScanState.IN_BLOCK_COMMENT and self.strict:
            where = locate(text, self._comment_start)
            raise UnterminatedCommentError(where.line, where.column)


def strip_comments(text: str, strict: bool = False) -> str:
    """Strip ``//`` and ``/* */`` comments from JSONC text.

    This is the public interface for comment stripping. It creates
    an instance of CommentStripper and delegates to it.

    Args:
        text: JSONC text
        strict: Fail on an unterminated block comment instead of silently
            consuming the rest of the input

    Returns:
        Plain JSON text with the same line structure

    Examples:
        >>> strip_comments('{"a": 1} /* note */')
        '{"a": 1} '

        >>> strip_comments('{"url": "http://example.com"}')
        '{"url": "http://example.com"}'
    """
    return CommentStripper(strict=strict).strip(text)


__all__ = ["ScanState", "CommentStripper", "strip_comments"]
