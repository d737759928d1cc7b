"""Check command implementation."""

import sys

import click

from jsonprep import (
    Backend,
    ParseError,
    UnterminatedCommentError,
    format_error,
)
from jsonprep.commands.utils import describe_parse_error, display_name, get_settings


@click.command()
@click.argument("file", type=click.File("rb"))
@click.option(
    "--jsonc/--no-jsonc",
    default=lambda: get_settings(click.get_current_context()).comments,
    help="Accept // and /* */ comments (default from settings)",
)
@click.option("--quiet", "-q", is_flag=True, help="Print nothing on success")
@click.pass_context
def check(ctx, file, jsonc: bool, quiet: bool):
    """Check that a file holds one valid JSON document.

    On failure, prints the line, column and offending line with a caret.

    FILE: Path to the file, or - for stdin
    """
    name = display_name(file)
    settings = get_settings(ctx)
    backend = Backend(
        "jsonc" if jsonc else "json",
        strip_comments=jsonc,
        strict_comments=settings.strict_comments,
    )

    try:
        backend.parse(file.read())
    except ParseError as e:
        click.echo(describe_parse_error(name, e), err=True)
        sys.exit(1)
    except UnterminatedCommentError as e:
        click.echo(format_error(f"{name}: {e}"), err=True)
        sys.exit(1)

    if not quiet:
        click.echo(f"{name}: OK")
