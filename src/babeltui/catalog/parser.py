# ABOUTME: Decoding and pattern extraction for Babelio search result pages.
# ABOUTME: Turns a raw response body into ExtractedFields and then into BookRecords.

import codecs
import html
import re
from collections.abc import Iterable
from urllib.parse import urljoin

from babeltui.catalog.errors import DecodeError
from babeltui.catalog.types import BookRecord, ExtractedFields
from babeltui.config import DEFAULT_BASE_URL, DEFAULT_ENCODING

# Compiled at import time: a broken pattern is a startup failure, not a per-search one.
_TITLE_RE = re.compile(r'<a href="/livres/[^"]*" class="titre1" >([^<]+)</a>')
_AUTHOR_RE = re.compile(r'<a href="/auteur/[^"]*" class="libelle" >([^<]+)</a>')
_DETAIL_URL_RE = re.compile(r'<a href="(/livres/[^"]*)"')
_THUMBNAIL_RE = re.compile(r'<img loading="lazy" src="([^"]*)"')


def decode_body(raw: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode a response body with the catalog's fixed legacy encoding.

    Undefined bytes are replaced rather than rejected, so for a valid
    encoding name this cannot fail.

    Raises:
        DecodeError: If the encoding name is unknown.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise DecodeError(f"Unknown encoding: {encoding}") from exc
    return raw.decode(encoding, errors="replace")


def _captures(pattern: re.Pattern[str], text: str) -> list[str]:
    """Return group 1 of every match in document order.

    An empty capture is still a match and keeps its place in the stream.
    """
    return [m.group(1) for m in pattern.finditer(text) if m.group(1) is not None]


def _clean_text(value: str) -> str:
    return html.unescape(value).strip()


def _absolutize(path: str, base_url: str) -> str:
    if not path:
        return ""
    return urljoin(base_url.rstrip("/") + "/", path)


def extract_fields(text: str, base_url: str = DEFAULT_BASE_URL) -> ExtractedFields:
    """Run the four field extractions independently over a decoded page.

    Titles and authors are unescaped and trimmed. Detail and thumbnail
    links are made absolute against the catalog origin; an empty image src
    stays empty so the thumbnail stream keeps one entry per image tag.
    """
    return ExtractedFields(
        titles=tuple(_clean_text(t) for t in _captures(_TITLE_RE, text)),
        authors=tuple(_clean_text(a) for a in _captures(_AUTHOR_RE, text)),
        detail_urls=tuple(_absolutize(u, base_url) for u in _captures(_DETAIL_URL_RE, text)),
        thumbnail_urls=tuple(
            _absolutize(src, base_url) for src in _captures(_THUMBNAIL_RE, text)
        ),
    )


def correlate_by_position(fields: ExtractedFields) -> list[BookRecord]:
    """Pair the four match streams into records by list index.

    Record i takes titles[i], authors[i], detail_urls[i] and thumbnail_urls[i].
    Streams of unequal length are truncated to the shortest one. A field
    missing from one entry shifts every later record; nothing here tries to
    detect that.
    """
    rows: Iterable[tuple[str, str, str, str]] = zip(
        fields.titles, fields.authors, fields.detail_urls, fields.thumbnail_urls
    )
    return [
        BookRecord(title=title, author=author, detail_url=url, thumbnail_url=thumb)
        for title, author, url, thumb in rows
    ]
