# ABOUTME: The interactive session state machine: mode, query buffer, results, and selection.
# ABOUTME: Interprets key events, drives the search pipeline, and exports the selected record.

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from babeltui.catalog.babelio import SearchFunction
from babeltui.catalog.errors import CatalogFetchError, ClipboardUnavailableError
from babeltui.catalog.types import BookRecord
from babeltui.export import PLACEHOLDER_TEXT, Clipboard, format_markdown
from babeltui.tui.keys import KeyCode, KeyEvent

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Saved to clipboard!"


class Mode(enum.Enum):
    NORMAL = "normal"
    EDITING = "editing"
    VIEWING = "viewing"


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot of a Session for the renderer.

    The transient status is deliberately absent: it is only available
    through Session.take_status().
    """

    mode: Mode
    query: str
    results: tuple[BookRecord, ...]
    selection: int | None
    last_error: str | None

    @property
    def selected_record(self) -> BookRecord | None:
        if self.selection is None:
            return None
        return self.results[self.selection]

    @property
    def preview_text(self) -> str:
        """Markdown for the selected record, or a placeholder when none is selected."""
        record = self.selected_record
        if record is None:
            return PLACEHOLDER_TEXT
        return format_markdown(record)


class Session:
    """Three-mode interactive session over a single search backend.

    NORMAL is the initial mode. EDITING owns the query buffer and submits
    it; VIEWING navigates results and exports the selection. The search
    call is synchronous: handle_key does not return until it completes.
    """

    def __init__(self, search: SearchFunction, clipboard: Clipboard) -> None:
        self._search = search
        self._clipboard = clipboard
        self.mode = Mode.NORMAL
        self.query = ""
        self.results: list[BookRecord] = []
        self.selection: int | None = None
        self.last_error: str | None = None
        self.should_exit = False
        self._status: str | None = None
        self._handlers: dict[Mode, Callable[[KeyEvent], None]] = {
            Mode.NORMAL: self._handle_normal,
            Mode.EDITING: self._handle_editing,
            Mode.VIEWING: self._handle_viewing,
        }

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key event according to the current mode.

        Keys with no meaning in the current mode are ignored.
        """
        self._handlers[self.mode](event)

    def take_status(self) -> str | None:
        """Return the pending status message and clear it."""
        status, self._status = self._status, None
        return status

    def snapshot(self) -> SessionView:
        return SessionView(
            mode=self.mode,
            query=self.query,
            results=tuple(self.results),
            selection=self.selection,
            last_error=self.last_error,
        )

    def _set_mode(self, mode: Mode) -> None:
        logger.debug("Mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def _reset_selection(self) -> None:
        self.selection = 0 if self.results else None

    def _handle_normal(self, event: KeyEvent) -> None:
        if event.code is not KeyCode.CHAR:
            return
        if event.char == "e":
            self._set_mode(Mode.EDITING)
        elif event.char == "v":
            self._set_mode(Mode.VIEWING)
            self._reset_selection()
        elif event.char == "q":
            self.should_exit = True

    def _handle_editing(self, event: KeyEvent) -> None:
        if event.code is KeyCode.CHAR and event.char:
            self.query += event.char
        elif event.code is KeyCode.BACKSPACE:
            self.query = self.query[:-1]
        elif event.code is KeyCode.ESCAPE:
            self._set_mode(Mode.NORMAL)
        elif event.code is KeyCode.ENTER:
            self._submit()

    def _handle_viewing(self, event: KeyEvent) -> None:
        if event.code is KeyCode.UP:
            self._move_selection(-1)
        elif event.code is KeyCode.DOWN:
            self._move_selection(1)
        elif event.code is KeyCode.ENTER:
            self._export_selection()
        elif event.code is KeyCode.CHAR and event.char == "q":
            self._set_mode(Mode.NORMAL)

    def _submit(self) -> None:
        """Run the search for the current query and apply the outcome.

        On failure the previous results stay in place and the session
        remains in EDITING so the user can fix the query and resubmit.
        """
        query = self.query
        try:
            records = self._search(query)
        except CatalogFetchError as exc:
            logger.warning("Search for %r failed (%s): %s", query, exc.kind, exc)
            self.last_error = str(exc) or f"{exc.kind} error"
            return

        logger.info("Search for %r returned %d records", query, len(records))
        self.results = list(records)
        self.last_error = None
        self._set_mode(Mode.VIEWING)
        self._reset_selection()

    def _move_selection(self, step: int) -> None:
        if self.selection is None:
            return
        self.selection = max(0, min(self.selection + step, len(self.results) - 1))

    def _export_selection(self) -> None:
        record = self.snapshot().selected_record
        if record is None:
            return
        try:
            self._clipboard.copy(format_markdown(record))
        except ClipboardUnavailableError as exc:
            self._status = str(exc)
            return
        self._status = SAVED_MESSAGE
