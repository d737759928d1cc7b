"""Locate command implementation."""

import sys

import click

from jsonprep import format_error, locate
from jsonprep.commands.utils import display_name


@click.command(name="locate")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.argument("offset", type=int)
def locate_command(file, offset: int):
    """Show the line and column of a character offset.

    Useful with tools that only report "error at position N".

    FILE: Path to the file, or - for stdin
    OFFSET: Zero-based character offset
    """
    name = display_name(file)
    try:
        text = file.read()
    except UnicodeDecodeError as e:
        click.echo(format_error(f"{name} is not valid UTF-8: {e.reason}"), err=True)
        sys.exit(1)

    where = locate(text, offset)
    click.echo(f"line {where.line}, col {where.column}")
    click.echo(where.snippet)
