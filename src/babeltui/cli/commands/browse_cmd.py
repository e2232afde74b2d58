# ABOUTME: The `babeltui browse` command running the interactive full-screen session.
# ABOUTME: Also the default action when babeltui is invoked without a subcommand.

import logging

import click
from rich.console import Console

from babeltui.cli.commands._factory import create_catalog
from babeltui.cli.options import base_url_option, encoding_option
from babeltui.export import PyperclipClipboard
from babeltui.tui.app import run_session
from babeltui.tui.session import Session

logger = logging.getLogger(__name__)


@click.command()
@encoding_option
@base_url_option
def browse(encoding: str, base_url: str) -> None:
    """Search Babelio interactively and copy a result as Markdown."""
    console = Console()
    if not console.is_terminal:
        console.print("[red]Error:[/red] browse needs an interactive terminal.")
        raise SystemExit(1)

    catalog, http_client = create_catalog(encoding, base_url)
    session = Session(catalog.search, PyperclipClipboard())
    try:
        run_session(session, console)
    except OSError as exc:
        logger.error("Terminal failure: %s", exc)
        console.print(f"[red]Error:[/red] could not drive the terminal: {exc}")
        raise SystemExit(1) from exc
    finally:
        http_client.close()
