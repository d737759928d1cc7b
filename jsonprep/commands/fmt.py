"""Format command implementation."""

import sys
import uuid
from pathlib import Path

import click

from jsonprep import (
    Backend,
    ParseError,
    StringifyError,
    UnterminatedCommentError,
    format_error,
    stringify,
)
from jsonprep.commands.utils import describe_parse_error, get_settings


@click.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Overwrite the file instead of printing to stdout",
)
@click.option("--indent", type=click.IntRange(min=0), help="Spaces per indent level")
@click.option("--compact", is_flag=True, help="Emit a single line with no spaces")
@click.pass_context
def fmt(ctx, file: Path, write: bool, indent: int | None, compact: bool):
    """Reformat a JSONC file as strict JSON.

    Comments are accepted on input but not preserved after formatting.

    FILE: Path to the file to format
    """
    settings = get_settings(ctx)
    if compact:
        indent = None
    elif indent is None:
        indent = settings.indent

    if not file.exists():
        click.echo(format_error(f"File not found: {file}"), err=True)
        sys.exit(1)

    backend = Backend(
        "jsonc", strip_comments=True, strict_comments=settings.strict_comments
    )
    try:
        data = backend.parse(file.read_bytes())
    except ParseError as e:
        click.echo(describe_parse_error(str(file), e), err=True)
        sys.exit(1)
    except UnterminatedCommentError as e:
        click.echo(format_error(f"{file}: {e}"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(format_error(f"Error reading {file}: {e}"), err=True)
        sys.exit(1)

    try:
        formatted = stringify(data, indent=indent)
    except StringifyError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    if not write:
        click.echo(formatted)
        return

    # Write atomically with unique temp file name
    temp_path = file.with_suffix(f".tmp.{uuid.uuid4().hex[:8]}")
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(formatted)
            f.write("\n")
        temp_path.replace(file)
        click.echo(f"Formatted {file}")
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        click.echo(format_error(f"Error writing file: {e}"), err=True)
        sys.exit(1)
