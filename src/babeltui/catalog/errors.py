# ABOUTME: Exception hierarchy for catalog lookups and clipboard export.
# ABOUTME: Fetch failures carry a kind so the session can report them uniformly.


class CatalogError(Exception):
    """Base class for all babeltui runtime failures."""


class CatalogFetchError(CatalogError):
    """Raised when a catalog search cannot produce a result list."""

    kind = "fetch"


class NetworkError(CatalogFetchError):
    """Connection, status, or body-read failure talking to the catalog."""

    kind = "network"


class DecodeError(CatalogFetchError):
    """The response body could not be decoded with the configured encoding."""

    kind = "decode"


class ProtocolError(CatalogFetchError):
    """The page structure could not be interpreted.

    Not raised by the regex extractor, which degrades to empty matches.
    """

    kind = "protocol"


class ClipboardUnavailableError(CatalogError):
    """Raised when the system clipboard cannot be written."""
