# ABOUTME: Terminal UI package for Babeltui: key decoding, session state, and rendering.
# ABOUTME: Exports the Session state machine and the event loop runner.

from babeltui.tui.app import run_session
from babeltui.tui.session import Mode, Session, SessionView

__all__ = [
    "Mode",
    "Session",
    "SessionView",
    "run_session",
]
