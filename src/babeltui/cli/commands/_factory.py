# ABOUTME: Construction of the catalog backend shared by CLI commands.
# ABOUTME: Wires settings, the HTTP client, and the Babelio pipeline together.

from babeltui.catalog.babelio import BabelioCatalog
from babeltui.catalog.http import CatalogHttpClient
from babeltui.config import CatalogSettings


def create_catalog(encoding: str, base_url: str) -> tuple[BabelioCatalog, CatalogHttpClient]:
    """Create the default catalog backend and the client it owns."""
    settings = CatalogSettings(base_url=base_url, encoding=encoding)
    http_client = CatalogHttpClient(settings)
    return BabelioCatalog(http_client, settings), http_client
