# ABOUTME: Catalog connection settings for Babeltui.
# ABOUTME: Holds the endpoint, form fields, browser headers, and page encoding.

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://www.babelio.com"
DEFAULT_SEARCH_PATH = "/recherche.php"
DEFAULT_ENCODING = "cp1252"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:129.0) Gecko/20100101 Firefox/129.0"
)
DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,image/png,image/svg+xml,*/*;q=0.8"
)
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.8,fr;q=0.5,fr-FR;q=0.3"


def _default_extra_fields() -> dict[str, str]:
    # The endpoint rejects the form without this empty field.
    return {"recherche": ""}


@dataclass(frozen=True)
class CatalogSettings:
    """Where and how to query the catalog.

    The site serves Windows-1252 regardless of what the request asks for,
    so the encoding is a property of the target rather than of the response.
    """

    base_url: str = DEFAULT_BASE_URL
    search_path: str = DEFAULT_SEARCH_PATH
    query_field: str = "Recherche"
    extra_fields: dict[str, str] = field(default_factory=_default_extra_fields)
    encoding: str = DEFAULT_ENCODING
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE

    @property
    def search_url(self) -> str:
        return self.base_url.rstrip("/") + self.search_path

    @property
    def headers(self) -> dict[str, str]:
        """Browser-identifying headers sent with every request."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }

    def form_data(self, query: str) -> dict[str, str]:
        """Build the form body for a search request."""
        data = {self.query_field: query}
        data.update(self.extra_fields)
        return data
