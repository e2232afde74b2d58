# ABOUTME: Markdown export of a selected record and clipboard access.
# ABOUTME: The clipboard is a Protocol so tests and headless runs can swap it out.

import logging
from typing import Protocol, runtime_checkable

import pyperclip

from babeltui.catalog.errors import ClipboardUnavailableError
from babeltui.catalog.types import BookRecord

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Search something!"


def format_markdown(record: BookRecord) -> str:
    """Render a record as the fixed three-line Markdown snippet."""
    return (
        f"{record.title} par {record.author}\n"
        f"- Sur [Babelio]({record.detail_url})\n"
        f"Thumb: {record.thumbnail_url}"
    )


@runtime_checkable
class Clipboard(Protocol):
    """Protocol for writing text to the system clipboard."""

    def copy(self, text: str) -> None: ...


class PyperclipClipboard:
    """System clipboard backed by pyperclip."""

    def copy(self, text: str) -> None:
        """Write text to the clipboard.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is available.
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.warning("Clipboard write failed: %s", exc)
            raise ClipboardUnavailableError(f"Clipboard unavailable: {exc}") from exc
        logger.debug("Copied %d characters to clipboard", len(text))
