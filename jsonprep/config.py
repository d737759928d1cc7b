"""Settings loading and validation."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .codec import Backend
from .errors import (
    ConfigError,
    ParseError,
    UnterminatedCommentError,
    format_field_error,
)
from .paths import get_config_path, is_explicit_config
from .segmenter import NUMBERING_MODES

_logging = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

# An unclosed /* in a settings file is an error, not a truncated file
_settings_backend = Backend("jsonc", strip_comments=True, strict_comments=True)


@dataclass
class Settings:
    """Defaults applied by the command line interface."""
    comments: bool = True
    strict_comments: bool = False
    max_line_length: int | None = None
    numbering: str = "record"
    indent: int | None = 2
    chunk_size: int = 65536

    def __post_init__(self):
        if not isinstance(self.comments, bool):
            raise ValueError(_field_error("comments", "must be a boolean"))
        if not isinstance(self.strict_comments, bool):
            raise ValueError(_field_error("strict_comments", "must be a boolean"))
        if self.max_line_length is not None and (
            not _is_int(self.max_line_length) or self.max_line_length < 1
        ):
            raise ValueError(
                _field_error("max_line_length", "must be a positive integer or null")
            )
        if self.numbering not in NUMBERING_MODES:
            raise ValueError(
                _field_error(
                    "numbering", f"must be one of {', '.join(NUMBERING_MODES)}"
                )
            )
        if self.indent is not None and (not _is_int(self.indent) or self.indent < 0):
            raise ValueError(
                _field_error("indent", "must be a non-negative integer or null")
            )
        if not _is_int(self.chunk_size) or self.chunk_size < 1:
            raise ValueError(_field_error("chunk_size", "must be a positive integer"))


def _field_error(field: str, issue: str) -> str:
    return format_field_error("Settings", field, issue)


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_settings(data: dict) -> Settings:
    """Validate and convert raw dict to Settings dataclass.

    Args:
        data: Raw dict from a settings file

    Returns:
        Settings object

    Raises:
        ConfigError: If validation fails with clear field errors
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be an object, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings field(s): {', '.join(unknown)}")

    try:
        return Settings(**data)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _format_syntax_error(error: ParseError) -> str:
    """Format a settings syntax error with line, caret, and context."""
    msg_parts = [
        f"Config syntax error at line {error.line}, col {error.column}: {error.message}"
    ]
    if error.snippet:
        msg_parts.append(error.snippet)
    return "\n".join(msg_parts)


def load_config(path_or_text: Path | str) -> dict:
    """Load and parse a settings file.

    Accepts either a file path or raw text. JSON text may contain // and
    /* */ comments. Paths ending in .yaml or .yml are read as YAML.

    Args:
        path_or_text: Either a Path to a settings file, or a string
            containing JSONC text

    Returns:
        A dict containing the parsed settings data

    Raises:
        ConfigError: If the file cannot be read or contains syntax errors.
        TypeError: If path_or_text is neither Path nor str.
    """
    if isinstance(path_or_text, Path):
        file_path = path_or_text
        try:
            original_text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {file_path}")
        except PermissionError:
            raise ConfigError(f"Permission denied reading config file: {file_path}")
        except UnicodeDecodeError:
            raise ConfigError(f"Config file is not valid UTF-8: {file_path}")
        except OSError as e:
            raise ConfigError(f"Error reading config file {file_path}: {e}")
        if file_path.suffix in YAML_SUFFIXES:
            return _load_yaml(original_text, file_path)
    elif isinstance(path_or_text, str):
        original_text = path_or_text
    else:
        raise TypeError(f"path_or_text must be Path or str, got {type(path_or_text).__name__}")

    try:
        result = _settings_backend.parse(original_text)
    except ParseError as e:
        raise ConfigError(_format_syntax_error(e)) from e
    except UnterminatedCommentError as e:
        raise ConfigError(f"Config syntax error: {e}") from e

    if not isinstance(result, dict):
        raise ConfigError(f"Config must be a JSON object, got {type(result).__name__}")

    return result


def _load_yaml(text: str, file_path: Path) -> dict:
    try:
        result = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Config syntax error in {file_path}: {e}") from e
    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ConfigError(f"Config must be a mapping, got {type(result).__name__}")
    return result


def load_settings(path_or_text: Path | str | None = None) -> Settings:
    """Load validated settings.

    With no argument, reads the user settings file. A missing default file
    yields default settings; a missing file named through JSONPREP_CONFIG
    is an error.

    Raises:
        ConfigError: If the file is unreadable, malformed, or invalid
    """
    if path_or_text is None:
        path_or_text = get_config_path()
        if not path_or_text.exists() and not is_explicit_config():
            _logging.debug(f"No settings file at {path_or_text}, using defaults")
            return Settings()

    settings = validate_settings(load_config(path_or_text))
    _logging.debug(f"Loaded settings: {settings}")
    return settings


__all__ = [
    "Settings",
    "validate_settings",
    "load_config",
    "load_settings",
]
