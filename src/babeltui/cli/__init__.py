# ABOUTME: CLI package for Babeltui, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging
from pathlib import Path

import click

from babeltui.cli.commands import browse_cmd, lookup_cmd

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: Path | None, verbose: bool) -> None:
    """Send babeltui log records to a file; the terminal belongs to the UI."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger = logging.getLogger("babeltui")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@click.group(invoke_without_command=True)
@click.version_option(package_name="babeltui")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a log to this file (default: no logging).",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log at DEBUG level instead of INFO.",
)
@click.pass_context
def cli(ctx: click.Context, log_file: Path | None, verbose: bool) -> None:
    """Babeltui - look up books on Babelio from the terminal."""
    _configure_logging(log_file, verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(browse_cmd.browse)


cli.add_command(browse_cmd.browse)
cli.add_command(lookup_cmd.lookup)
