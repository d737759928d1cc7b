"""Prepare and diagnose JSON-like text before decoding.

Comment stripping for JSONC, streaming line segmentation for JSON Lines,
and offset-to-line/column diagnostics.
"""

import logging

from .api import parse, parse_jsonc, stringify, stringify_jsonc
from .codec import Backend, JsonCodec, get_backend, json_backend, jsonc_backend
from .comments import CommentStripper, ScanState, strip_comments
from .config import Settings, load_settings, validate_settings
from .errors import (
    ConfigError,
    JsonLinesParseError,
    JsonprepError,
    LineTooLongError,
    ParseError,
    SegmenterClosedError,
    StringifyError,
    UnknownBackendError,
    UnterminatedCommentError,
    ValidationError,
    format_error,
    format_field_error,
    format_suggestion,
)
from .jsonlines import (
    aiter_json_lines,
    aiter_records,
    iter_json_lines,
    iter_records,
    iter_stringify_json_lines,
    parse_json_lines,
    stringify_json_lines,
)
from .locator import DiagnosticLocation, build_snippet, extract_offset, locate
from .segmenter import LineRecord, LineSegmenter

__version__ = "0.3.0"

LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure root logging for command line use.

    DEBUG when ``debug`` is set, WARNING otherwise. Calling it again
    replaces the level of the existing configuration.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


__all__ = [
    "__version__",
    "setup_logging",
    # api
    "parse",
    "parse_jsonc",
    "stringify",
    "stringify_jsonc",
    # codec
    "Backend",
    "JsonCodec",
    "get_backend",
    "json_backend",
    "jsonc_backend",
    # comments
    "CommentStripper",
    "ScanState",
    "strip_comments",
    # locator
    "DiagnosticLocation",
    "locate",
    "build_snippet",
    "extract_offset",
    # segmenter
    "LineRecord",
    "LineSegmenter",
    # jsonlines
    "parse_json_lines",
    "iter_records",
    "iter_json_lines",
    "aiter_records",
    "aiter_json_lines",
    "stringify_json_lines",
    "iter_stringify_json_lines",
    # config
    "Settings",
    "load_settings",
    "validate_settings",
    # errors
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
