"""CLI command definitions for jsonprep."""

import sys

import click

from jsonprep import ConfigError, format_error, load_settings, setup_logging
from jsonprep.commands.check import check
from jsonprep.commands.fmt import fmt
from jsonprep.commands.lines import lines
from jsonprep.commands.locate import locate_command
from jsonprep.commands.strip import strip


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.pass_context
def cli(ctx, debug):
    """Prepare and diagnose JSON, JSONC and JSON Lines files."""
    setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    try:
        ctx.obj["settings"] = load_settings()
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)


# Register all commands
cli.add_command(strip)
cli.add_command(check)
cli.add_command(lines)
cli.add_command(fmt)
cli.add_command(locate_command, name="locate")

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
