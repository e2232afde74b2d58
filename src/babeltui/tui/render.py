# ABOUTME: Rich rendering of a session snapshot into a full-screen layout.
# ABOUTME: Query box, results list, Markdown preview, and a mode-specific help footer.

from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from babeltui.tui.session import Mode, SessionView

HELP_TEXT = {
    Mode.NORMAL: "Press 'e' to edit query, 'v' to navigate results, 'q' to quit",
    Mode.EDITING: "Enter query, press Enter to search, Esc to cancel",
    Mode.VIEWING: (
        "Select a result with Up/Down, press Enter to copy to clipboard, "
        "press 'q' to go back"
    ),
}

HIGHLIGHT_SYMBOL = ">> "
_HIGHLIGHT_STYLE = "on yellow"


def _render_query(view: SessionView) -> Panel:
    style = "yellow" if view.mode is Mode.EDITING else ""
    subtitle = Text(view.last_error, style="red") if view.last_error else None
    return Panel(
        Text(view.query, style=style),
        title="query",
        title_align="left",
        subtitle=subtitle,
    )


def visible_rows(total: int, selection: int | None, height: int | None) -> range:
    """Indices of the results that fit in a list of the given height.

    The window starts at the top and only scrolls once the selection would
    fall below the last visible row, keeping the selection on the bottom row.
    """
    if height is None or height >= total:
        return range(total)
    height = max(height, 1)
    start = 0
    if selection is not None and selection >= height:
        start = selection - height + 1
    return range(start, start + height)


class ResultsList:
    """One line per result, scrolled so the selected line stays visible.

    The number of rows is only known at render time, from the height the
    enclosing panel hands down.
    """

    def __init__(self, view: SessionView) -> None:
        self._view = view

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        results = self._view.results
        padding = " " * len(HIGHLIGHT_SYMBOL)
        for index in visible_rows(len(results), self._view.selection, options.height):
            label = results[index].display_label
            if index == self._view.selection:
                yield Text(
                    HIGHLIGHT_SYMBOL + label,
                    style=_HIGHLIGHT_STYLE,
                    no_wrap=True,
                    overflow="ellipsis",
                )
            else:
                yield Text(padding + label, no_wrap=True, overflow="ellipsis")


def _render_results(view: SessionView) -> Panel:
    return Panel(ResultsList(view), title="Results", title_align="left")


def _render_preview(view: SessionView) -> Panel:
    style = "yellow" if view.mode is Mode.VIEWING else ""
    return Panel(
        Text(view.preview_text, style=style),
        title="Markdown",
        title_align="left",
    )


def footer_text(mode: Mode, status: str | None) -> str:
    """Help line for the mode, prefixed by the transient status when present."""
    help_text = HELP_TEXT[mode]
    if status:
        return f"{status} || {help_text}"
    return help_text


def render(view: SessionView, status: str | None = None) -> Layout:
    """Build the full-screen layout for one frame.

    Takes the status as a separate argument so the caller decides when to
    consume it; nothing here touches the session.
    """
    layout = Layout()
    layout.split_column(
        Layout(_render_query(view), name="query", size=3),
        Layout(_render_results(view), name="results", ratio=2, minimum_size=10),
        Layout(_render_preview(view), name="preview", ratio=1),
        Layout(
            Text(footer_text(view.mode, status), style="cyan", justify="center"),
            name="footer",
            size=3,
        ),
    )
    return layout
