# ABOUTME: Unit tests for rendering a session snapshot with Rich.
# ABOUTME: Renders to an in-memory Console and checks the visible text.

from io import StringIO

from rich.console import Console

from babeltui.catalog.types import BookRecord
from babeltui.tui.render import HELP_TEXT, footer_text, render, visible_rows
from babeltui.tui.session import Mode, SessionView


def _render_text(view: SessionView, status: str | None = None) -> str:
    console = Console(file=StringIO(), width=120, height=30, color_system=None)
    console.print(render(view, status))
    return console.file.getvalue()  # type: ignore[attr-defined]


def _view(
    records: list[BookRecord],
    *,
    mode: Mode = Mode.VIEWING,
    selection: int | None = 0,
    query: str = "",
    last_error: str | None = None,
) -> SessionView:
    return SessionView(
        mode=mode,
        query=query,
        results=tuple(records),
        selection=selection,
        last_error=last_error,
    )


class TestFooterText:
    """Tests for footer_text()."""

    def test_help_only(self) -> None:
        assert footer_text(Mode.NORMAL, None) == HELP_TEXT[Mode.NORMAL]

    def test_status_prefix(self) -> None:
        assert footer_text(Mode.VIEWING, "Saved to clipboard!") == (
            "Saved to clipboard! || " + HELP_TEXT[Mode.VIEWING]
        )


class TestVisibleRows:
    """Tests for the results scrolling window."""

    def test_everything_fits(self) -> None:
        assert visible_rows(5, 4, 10) == range(5)

    def test_unknown_height_shows_all(self) -> None:
        assert visible_rows(50, 49, None) == range(50)

    def test_top_window_until_selection_leaves_it(self) -> None:
        assert visible_rows(30, 9, 10) == range(0, 10)

    def test_scrolls_to_keep_selection_on_last_row(self) -> None:
        assert visible_rows(30, 25, 10) == range(16, 26)

    def test_last_result(self) -> None:
        assert visible_rows(30, 29, 10) == range(20, 30)

    def test_no_selection_shows_top(self) -> None:
        assert visible_rows(30, None, 10) == range(0, 10)


class TestRender:
    """Tests for render()."""

    def test_shows_query_and_panels(self) -> None:
        output = _render_text(_view([], mode=Mode.EDITING, selection=None, query="97820"))
        assert "97820" in output
        assert "Results" in output
        assert "Markdown" in output
        assert "Search something!" in output
        assert "press Enter to search" in output

    def test_highlights_selected_record(self, sample_records: list[BookRecord]) -> None:
        output = _render_text(_view(sample_records, selection=1))
        assert ">> Le mythe de Sisyphe by Albert Camus" in output
        assert ">> L'Étranger" not in output
        assert "L'Étranger by Albert Camus" in output

    def test_preview_shows_selected_markdown(self, sample_records: list[BookRecord]) -> None:
        output = _render_text(_view(sample_records, selection=2))
        assert "Vendredi ou la vie sauvage par Michel Tournier" in output
        assert "- Sur [Babelio]" in output

    def test_status_shown_in_footer(self, sample_records: list[BookRecord]) -> None:
        output = _render_text(_view(sample_records), "Saved to clipboard!")
        assert "Saved to clipboard! ||" in output

    def test_last_error_shown(self) -> None:
        output = _render_text(
            _view([], mode=Mode.EDITING, selection=None, last_error="HTTP 503")
        )
        assert "HTTP 503" in output

    def test_render_does_not_change_view(self, sample_records: list[BookRecord]) -> None:
        view = _view(sample_records, selection=1)
        _render_text(view)
        assert view.selection == 1
        assert view.results == tuple(sample_records)

    def test_selection_past_panel_height_stays_visible(self) -> None:
        """Moving far down scrolls the list instead of hiding the cursor."""
        records = [
            BookRecord(title=f"Book {i:02d}", author="Anon", detail_url=f"u{i}")
            for i in range(30)
        ]

        output = _render_text(_view(records, selection=25))

        assert ">> Book 25 by Anon" in output
        assert "Book 00" not in output
        assert "Book 26" not in output

    def test_long_label_takes_one_row(self) -> None:
        record = BookRecord(title="T" * 300, author="Anon", detail_url="u")
        output = _render_text(_view([record], selection=0))
        assert output.count(">> T") == 1
