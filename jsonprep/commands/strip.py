"""Strip command implementation."""

import sys

import click

from jsonprep import UnterminatedCommentError, format_error, strip_comments
from jsonprep.commands.utils import display_name, get_settings


@click.command()
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Write the result here instead of stdout",
)
@click.option(
    "--strict/--no-strict",
    default=lambda: get_settings(click.get_current_context()).strict_comments,
    help="Fail on an unterminated /* comment",
)
def strip(file, output, strict: bool):
    """Remove // and /* */ comments from a JSONC file.

    Newlines are kept, so line numbers in the output match the input.

    FILE: Path to the JSONC file, or - for stdin
    """
    name = display_name(file)
    try:
        text = file.read()
    except UnicodeDecodeError as e:
        click.echo(format_error(f"{name} is not valid UTF-8: {e.reason}"), err=True)
        sys.exit(1)

    try:
        stripped = strip_comments(text, strict=strict)
    except UnterminatedCommentError as e:
        click.echo(format_error(f"{name}: {e}"), err=True)
        sys.exit(1)

    output.write(stripped)
