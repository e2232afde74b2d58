# ABOUTME: The single-threaded poll loop driving the interactive session.
# ABOUTME: Render a frame, block on one key, dispatch it, repeat until the user quits.

import logging
from collections.abc import Callable

from rich.console import Console
from rich.layout import Layout

from babeltui.tui.keys import KeyEvent, read_keys
from babeltui.tui.render import render
from babeltui.tui.session import Session

logger = logging.getLogger(__name__)


def _frame(session: Session) -> Layout:
    return render(session.snapshot(), session.take_status())


def run_session(
    session: Session,
    console: Console,
    *,
    next_keys: Callable[[], list[KeyEvent]] = read_keys,
) -> None:
    """Run the session on the alternate screen until it asks to exit.

    Every key in a multi-key chunk is dispatched in order before the next
    frame. The search runs inside handle_key, so no frame is drawn and no key is
    read while a request is outstanding. The alternate screen is released
    on every exit path, including exceptions from the pipeline.
    Ctrl-C and Ctrl-D end the session like 'q' does.
    """
    with console.screen() as screen:
        logger.debug("Entered alternate screen")
        screen.update(_frame(session))
        while not session.should_exit:
            try:
                events = next_keys()
            except (KeyboardInterrupt, EOFError):
                logger.debug("Interrupted, leaving session")
                break
            for event in events:
                session.handle_key(event)
                if session.should_exit:
                    break
            if session.should_exit:
                break
            screen.update(_frame(session))
    logger.debug("Left alternate screen")
