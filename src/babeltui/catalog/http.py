# ABOUTME: HTTP client abstraction for catalog search requests.
# ABOUTME: Sends one form POST with browser headers and an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from babeltui.catalog.errors import NetworkError
from babeltui.config import CatalogSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for form POST operations against the catalog."""

    def post_form(self, url: str, data: dict[str, str]) -> bytes: ...


class CatalogHttpClient:
    """HTTP client for catalog search pages.

    Wraps httpx.Client with the browser-identifying headers the catalog
    expects. Each call is a single attempt: no retry, no rate limiting, and
    the transport's default timeout. Returns the raw body so decoding stays
    an explicit step of the pipeline.
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or CatalogSettings()
        client_kwargs: dict[str, Any] = {"headers": settings.headers}
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def post_form(self, url: str, data: dict[str, str]) -> bytes:
        """Send a form-encoded POST and return the response body.

        Args:
            url: The URL to post to.
            data: Form fields, sent as application/x-www-form-urlencoded.

        Returns:
            The undecoded response body.

        Raises:
            NetworkError: On connection failure, non-success status, or body read error.
        """
        logger.debug("POST %s", url)
        try:
            response = self._client.post(url, data=data)
            response.raise_for_status()
            body = response.content
        except httpx.HTTPStatusError as exc:
            logger.warning("HTTP %d from %s", exc.response.status_code, url)
            raise NetworkError(f"HTTP {exc.response.status_code} from {url}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise NetworkError(f"Request failed: {url}: {exc}") from exc
        finally:
            # Nothing is carried over from one search to the next.
            self._client.cookies.clear()

        logger.debug("Received %d bytes from %s", len(body), url)
        return body

    def close(self) -> None:
        self._client.close()
