"""Convenience API for parsing and stringifying JSON and JSONC."""

from collections.abc import Callable
from typing import Any, TypeVar

from .codec import json_backend, jsonc_backend
from .errors import ValidationError

T = TypeVar("T")


def parse(
    text: str | bytes,
    comments: bool = False,
    validator: Callable[[Any], T] | None = None,
) -> Any:
    """Parse a JSON document, optionally stripping comments first.

    Args:
        text: JSON (or JSONC when ``comments`` is set) as text or UTF-8 bytes
        comments: Strip ``//`` and ``/* */`` comments before decoding
        validator: Called with the decoded value; its return value is
            returned instead. ValueError/TypeError become ValidationError.

    Returns:
        The decoded (and validated) value

    Raises:
        ParseError: If the document is not valid JSON
        ValidationError: If the validator rejects the value

    Examples:
        >>> parse('{"id": 1, "name": "Paul"}')
        {'id': 1, 'name': 'Paul'}

        >>> parse('{"id": 1, // comment\\n"name": "Paul"}', comments=True)
        {'id': 1, 'name': 'Paul'}
    """
    backend = jsonc_backend if comments else json_backend
    return apply_validator(backend.parse(text), validator)


def parse_jsonc(
    text: str | bytes, validator: Callable[[Any], T] | None = None
) -> Any:
    """Parse JSONC (JSON with Comments)."""
    return parse(text, comments=True, validator=validator)


def stringify(value: Any, indent: int | None = None) -> str:
    """Encode a value as JSON text.

    Raises:
        StringifyError: If the value cannot be encoded
    """
    return json_backend.stringify(value, indent=indent)


def stringify_jsonc(value: Any, indent: int | None = None) -> str:
    """Encode a value for a JSONC file.

    Output is plain JSON: comments are never generated.
    """
    return jsonc_backend.stringify(value, indent=indent)


def apply_validator(value: Any, validator: Callable[[Any], T] | None) -> Any:
    if validator is None:
        return value
    try:
        return validator(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Validation failed: {e}", value) from e


__all__ = ["parse", "parse_jsonc", "stringify", "stringify_jsonc", "apply_validator"]
