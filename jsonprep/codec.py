"""JSON codec and backends.

The codec wraps the standard library ``json`` module and converts its
failures into ``ParseError``/``StringifyError`` with a located diagnostic.
A backend pairs the codec with an optional text preparation step; the
``jsonc`` backend strips comments before decoding.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from .comments import strip_comments
from .errors import ParseError, StringifyError, UnknownBackendError
from .locator import extract_offset, locate

_logging = logging.getLogger(__name__)


def to_text(data: str | bytes) -> str:
    """Return ``data`` as text, decoding bytes as UTF-8.

    Raises:
        ParseError: If the bytes are not valid UTF-8
    """
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        valid = bytes(data)[: e.start].decode("utf-8")
        raise _located_error(f"Invalid UTF-8: {e.reason}", valid, len(valid)) from e


class JsonCodec:
    """Standard JSON decode/encode with located failures."""

    def decode(self, text: str | bytes) -> Any:
        """Decode one JSON document.

        Raises:
            ParseError: With line, column and snippet of the failure
        """
        text = to_text(text)
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise _located_error(e.msg, text, extract_offset(e)) from e
        except _ConstantError as e:
            raise _located_error(str(e), text, _constant_offset(text, e.name)) from e

    def encode(self, value: Any, indent: int | None = None) -> str:
        """Encode a value as JSON text.

        Raises:
            StringifyError: If the value holds a cycle, an unsupported type
                or a NaN/infinite float
        """
        try:
            separators = (",", ":") if indent is None else None
            return json.dumps(
                value,
                indent=indent,
                separators=separators,
                ensure_ascii=False,
                allow_nan=False,
            )
        except ValueError as e:
            message = str(e).lower()
            if "circular" in message:
                reason = "cycle"
            elif "out of range float" in message:
                reason = "type_error"
            else:
                reason = "unknown"
            raise StringifyError(f"Failed to stringify: {e}", reason) from e
        except TypeError as e:
            raise StringifyError(f"Failed to stringify: {e}", "type_error") from e
        except RecursionError as e:
            raise StringifyError(f"Failed to stringify: {e}", "unknown") from e


class _ConstantError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not valid JSON")


def _reject_constant(name: str):
    raise _ConstantError(name)


def _constant_offset(text: str, name: str) -> int:
    # the decoder does not report where the constant was; take its first
    # occurrence outside a string
    in_string = escaped = False
    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith(name, i):
            return i
    return 0


def _located_error(message: str, text: str, offset: int) -> ParseError:
    where = locate(text, offset)
    return ParseError(message, where.line, where.column, where.snippet, offset)


@dataclass(frozen=True)
class Backend:
    """A named codec configuration.

    ``strip_comments`` makes decode accept JSONC; encode output is plain
    JSON either way.
    """

    name: str
    strip_comments: bool = False
    strict_comments: bool = False
    codec: JsonCodec = JsonCodec()

    def prepare(self, text: str | bytes) -> str:
        """Return the exact text the codec will see."""
        text = to_text(text)
        if self.strip_comments:
            return strip_comments(text, strict=self.strict_comments)
        return text

    def parse(self, text: str | bytes) -> Any:
        return self.codec.decode(self.prepare(text))

    def stringify(self, value: Any, indent: int | None = None) -> str:
        return self.codec.encode(value, indent=indent)


json_backend = Backend("json")
jsonc_backend = Backend("jsonc", strip_comments=True)

_BACKENDS = {
    json_backend.name: json_backend,
    jsonc_backend.name: jsonc_backend,
}


def get_backend(name: str) -> Backend:
    """Look up a registered backend by name.

    Raises:
        UnknownBackendError: If no backend has that name
    """
    try:
        backend = _BACKENDS[name]
    except KeyError:
        raise UnknownBackendError(
            f"Unknown backend '{name}'. Available: {', '.join(sorted(_BACKENDS))}"
        ) from None
    _logging.debug(f"Using backend: {name}")
    return backend


__all__ = [
    "JsonCodec",
    "Backend",
    "json_backend",
    "jsonc_backend",
    "get_backend",
    "to_text",
]
