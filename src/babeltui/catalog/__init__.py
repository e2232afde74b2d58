# ABOUTME: Catalog package for Babelio search, page extraction, and result records.
# ABOUTME: Exports the pipeline entry point and the BookRecord dataclass.

from babeltui.catalog.babelio import BabelioCatalog, SearchFunction
from babeltui.catalog.errors import CatalogFetchError
from babeltui.catalog.types import BookRecord

__all__ = [
    "BabelioCatalog",
    "BookRecord",
    "CatalogFetchError",
    "SearchFunction",
]
