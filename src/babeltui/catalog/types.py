# ABOUTME: Core data structures for catalog search results.
# ABOUTME: BookRecord is the interchange format between extraction, session, and export.

from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """One book entry extracted from a catalog search page.

    Every field is a plain string. Missing values are empty strings rather
    than None, since the extractor only ever produces what it matched.
    """

    title: str
    author: str
    detail_url: str
    thumbnail_url: str = ""

    @property
    def display_label(self) -> str:
        """Line shown in the results list."""
        return f"{self.title} by {self.author}"


@dataclass(frozen=True)
class ExtractedFields:
    """The four independent match streams pulled out of a search page.

    Each tuple is in document order. They are NOT guaranteed to have equal
    lengths; correlating them into records is a separate step.
    """

    titles: tuple[str, ...] = ()
    authors: tuple[str, ...] = ()
    detail_urls: tuple[str, ...] = ()
    thumbnail_urls: tuple[str, ...] = ()
