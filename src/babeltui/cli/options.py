# ABOUTME: Shared Click options for Babeltui CLI commands.
# ABOUTME: Provides reusable decorators for the catalog encoding and base URL.

import click

from babeltui.config import DEFAULT_BASE_URL, DEFAULT_ENCODING

encoding_option = click.option(
    "--encoding",
    default=DEFAULT_ENCODING,
    show_default=True,
    help="Text encoding the catalog serves its pages in.",
)

base_url_option = click.option(
    "--base-url",
    default=DEFAULT_BASE_URL,
    hidden=True,
    help="Catalog origin, for testing against a mirror.",
)
