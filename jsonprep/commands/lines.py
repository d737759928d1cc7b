"""Lines command implementation."""

import logging
import sys

import click

from jsonprep import (
    JsonLinesParseError,
    LineTooLongError,
    ParseError,
    format_error,
    format_suggestion,
    iter_json_lines,
)
from jsonprep.commands.utils import (
    describe_parse_error,
    display_name,
    get_settings,
    read_chunks,
)
from jsonprep.segmenter import NUMBERING_MODES

_logging = logging.getLogger(__name__)


@click.command()
@click.argument("file", type=click.File("rb"))
@click.option("--chunk-size", type=click.IntRange(min=1), help="Bytes read per chunk")
@click.option(
    "--max-line-length",
    type=click.IntRange(min=1),
    help="Reject lines longer than this many characters",
)
@click.option(
    "--numbering",
    type=click.Choice(NUMBERING_MODES),
    help="'record' skips blank lines when numbering, 'source' counts them",
)
@click.pass_context
def lines(ctx, file, chunk_size: int | None, max_line_length: int | None, numbering: str | None):
    """Validate a JSON Lines file record by record.

    The file is read in chunks, so it never has to fit in memory at once
    (apart from its longest line). Stops at the first invalid record.

    FILE: Path to the JSON Lines file, or - for stdin
    """
    name = display_name(file)
    settings = get_settings(ctx)
    chunk_size = chunk_size or settings.chunk_size
    if max_line_length is None:
        max_line_length = settings.max_line_length
    numbering = numbering or settings.numbering
    _logging.debug(f"Reading {name} in {chunk_size}-byte chunks")

    count = 0
    try:
        for _ in iter_json_lines(
            read_chunks(file, chunk_size),
            max_line_length=max_line_length,
            numbering=numbering,
        ):
            count += 1
    except JsonLinesParseError as e:
        click.echo(
            describe_parse_error(name, e, line=e.line_number, message=e.detail),
            err=True,
        )
        sys.exit(1)
    except LineTooLongError as e:
        click.echo(format_suggestion(str(e), "raise --max-line-length"), err=True)
        sys.exit(1)
    except ParseError as e:
        click.echo(format_error(f"{name}: {e.message}"), err=True)
        sys.exit(1)

    click.echo(f"{name}: {count} record(s) OK")
