"""Exception types and error formatting utilities.

Every exception raised by jsonprep derives from ``JsonprepError`` so callers
can catch the whole family at once. Errors that point at a place in a text
carry ``line``/``column``/``snippet`` attributes computed by
``jsonprep.locator``.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Locations are reported as 'line L, col C', both 1-based
- Use present tense: 'must be', 'is required'
- Include actionable hints where helpful
"""


class JsonprepError(Exception):
    """Base class for all jsonprep errors."""


class ParseError(JsonprepError):
    """Raised when decoding JSON text fails.

    Attributes:
        message: The codec's own description of the failure
        line: 1-based line of the failure
        column: 1-based column of the failure
        snippet: Offending source line followed by a caret line
        offset: Zero-based character offset the codec reported
    """

    def __init__(
        self,
        message: str,
        line: int = 1,
        column: int = 1,
        snippet: str = "",
        offset: int = 0,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.snippet = snippet
        self.offset = offset
        super().__init__(self._render())

    def _render(self) -> str:
        text = f"{self.message} (line {self.line}, col {self.column})"
        if self.snippet:
            text = f"{text}\n{self.snippet}"
        return text


class JsonLinesParseError(ParseError):
    """Raised when one record of a JSON Lines input fails to decode.

    ``line_number`` is the number the segmenter assigned to the record;
    ``line`` is always 1 because each record is decoded on its own, and
    ``column`` is relative to the record text.
    ``detail`` is the codec message without the line prefix.
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        column: int = 1,
        snippet: str = "",
        offset: int = 0,
    ) -> None:
        self.line_number = line_number
        self.detail = message
        super().__init__(
            f"Line {line_number}: {message}",
            line=1,
            column=column,
            snippet=snippet,
            offset=offset,
        )


class ValidationError(JsonprepError):
    """Raised when a decoded value is rejected by a caller-supplied validator."""

    def __init__(self, message: str, value: object = None) -> None:
        self.message = message
        self.value = value
        super().__init__(message)


class StringifyError(JsonprepError):
    """Raised when a value cannot be encoded as JSON.

    ``reason`` is one of ``"cycle"``, ``"type_error"`` or ``"unknown"``.
    """

    def __init__(self, message: str, reason: str = "unknown") -> None:
        self.message = message
        self.reason = reason
        super().__init__(message)


class LineTooLongError(JsonprepError):
    """Raised by a segmenter configured with ``max_line_length``.

    ``emitted`` holds the records the failing ``feed`` call completed before
    it reached the oversized line.
    """

    def __init__(self, line_number: int, length: int, limit: int, emitted=()) -> None:
        self.line_number = line_number
        self.length = length
        self.limit = limit
        self.emitted = list(emitted)
        super().__init__(
            f"Line {line_number} is too long: {length} characters (limit {limit})"
        )


class SegmenterClosedError(JsonprepError):
    """Raised when a flushed segmenter is fed or flushed again."""


class UnterminatedCommentError(JsonprepError):
    """Raised in strict mode when a ``/*`` comment never closes."""

    def __init__(self, line: int, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(
            f"Unterminated block comment starting at line {line}, col {column}"
        )


class UnknownBackendError(JsonprepError):
    """Raised when a backend name is not registered."""


class ConfigError(JsonprepError):
    """Raised when settings loading or validation fails.

    Provides detailed error messages including line numbers,
    column positions, and caret indicators for syntax errors.
    """


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("file not found")
        'Error: file not found'
    """
    return f"Error: {message}"


def format_field_error(entity: str, field: str, issue: str) -> str:
    """Format a field validation error with structured format.

    Examples:
        >>> format_field_error("Settings", "indent", "must be an integer or null")
        "Settings field 'indent' must be an integer or null"
    """
    return f"{entity} field '{field}' {issue}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("line 3 is too long", "raise --max-line-length")
        'Error: line 3 is too long. Hint: raise --max-line-length'
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "JsonprepError",
    "ParseError",
    "JsonLinesParseError",
    "ValidationError",
    "StringifyError",
    "LineTooLongError",
    "SegmenterClosedError",
    "UnterminatedCommentError",
    "UnknownBackendError",
    "ConfigError",
    "format_error",
    "format_field_error",
    "format_suggestion",
]
