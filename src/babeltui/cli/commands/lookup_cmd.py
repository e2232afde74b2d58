# ABOUTME: The `babeltui lookup` command for a one-shot, non-interactive search.
# ABOUTME: Prints matching records as a table, or one record as a Markdown snippet.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from babeltui.catalog.errors import CatalogFetchError
from babeltui.cli.commands._factory import create_catalog
from babeltui.cli.options import base_url_option, encoding_option
from babeltui.export import format_markdown

console = Console()


@click.command()
@click.argument("query")
@click.option(
    "-m",
    "--markdown",
    "markdown_index",
    type=click.IntRange(min=1),
    default=None,
    help="Print result N as the Markdown snippet instead of the table.",
)
@encoding_option
@base_url_option
def lookup(query: str, markdown_index: int | None, encoding: str, base_url: str) -> None:
    """Search Babelio once for QUERY (usually an ISBN) and print the results."""
    catalog, http_client = create_catalog(encoding, base_url)
    try:
        records = catalog.search(query)
    except CatalogFetchError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
    finally:
        http_client.close()

    if not records:
        console.print("[yellow]No results found.[/yellow]")
        return

    if markdown_index is not None:
        if markdown_index > len(records):
            console.print(
                f"[red]Error:[/red] only {len(records)} result(s), no #{markdown_index}."
            )
            raise SystemExit(1)
        console.print(
            format_markdown(records[markdown_index - 1]),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Link", style="dim")

    for i, record in enumerate(records, start=1):
        table.add_row(
            str(i),
            escape(record.title),
            escape(record.author) or "[dim]unknown[/dim]",
            escape(record.detail_url),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} result(s)[/dim]")
