# ABOUTME: Babelio catalog search pipeline.
# ABOUTME: Posts a query, decodes the page, extracts fields, and correlates them into records.

import logging
from collections.abc import Callable

from babeltui.catalog.http import HttpClient
from babeltui.catalog.parser import correlate_by_position, decode_body, extract_fields
from babeltui.catalog.types import BookRecord, ExtractedFields
from babeltui.config import CatalogSettings

logger = logging.getLogger(__name__)

SearchFunction = Callable[[str], list[BookRecord]]
Correlator = Callable[[ExtractedFields], list[BookRecord]]


class BabelioCatalog:
    """Search backend for babelio.com.

    Uses dependency-injected HttpClient for testability. The correlator is
    injectable too, so a block-structured parser can replace the positional
    pairing without touching callers.
    """

    def __init__(
        self,
        http_client: HttpClient,
        settings: CatalogSettings | None = None,
        *,
        correlate: Correlator = correlate_by_position,
    ) -> None:
        self._http = http_client
        self._settings = settings or CatalogSettings()
        self._correlate = correlate

    @property
    def name(self) -> str:
        return "babelio"

    def search(self, query: str) -> list[BookRecord]:
        """Look up a free-text query (usually an ISBN) on the catalog.

        An empty list is a valid outcome: the site answered but nothing on
        the page matched.

        Raises:
            NetworkError: If the request fails.
            DecodeError: If the configured encoding is unknown.
        """
        raw = self._http.post_form(
            self._settings.search_url, self._settings.form_data(query)
        )
        text = decode_body(raw, self._settings.encoding)
        fields = extract_fields(text, self._settings.base_url)
        records = self._correlate(fields)
        logger.info(
            "Search %r: %d titles, %d authors, %d links, %d thumbnails -> %d records",
            query,
            len(fields.titles),
            len(fields.authors),
            len(fields.detail_urls),
            len(fields.thumbnail_urls),
            len(records),
        )
        return records
