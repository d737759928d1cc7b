"""Shared utility functions for commands."""

from typing import BinaryIO, Iterator

import click

from jsonprep import ParseError, Settings


def get_settings(ctx: click.Context) -> Settings:
    """Return the settings loaded by the group, or defaults."""
    obj = ctx.find_root().obj or {}
    return obj.get("settings") or Settings()


def display_name(stream) -> str:
    """Name to show for ``stream`` in messages; unnamed streams are stdin."""
    name = getattr(stream, "name", None)
    return name if isinstance(name, str) else "<stdin>"


def read_chunks(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """Yield fixed-size byte chunks from ``stream`` until EOF.

    Args:
        stream: Binary file object
        chunk_size: Maximum bytes per chunk

    Returns:
        Iterator of byte chunks; the last one may be shorter
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def describe_parse_error(
    name: str, error: ParseError, line: int | None = None, message: str | None = None
) -> str:
    """Render a parse error as 'NAME:LINE:COL: message' plus snippet.

    ``line`` overrides the error's own line, e.g. with a record number;
    ``message`` overrides its message.
    """
    line = error.line if line is None else line
    message = error.message if message is None else message
    text = f"{name}:{line}:{error.column}: {message}"
    if error.snippet:
        text = f"{text}\n{error.snippet}"
    return text
