# ABOUTME: Key event model and decoding of raw terminal input.
# ABOUTME: Translates click.getchar() strings into KeyEvent values the session understands.

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass

import click


class KeyCode(enum.Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """A single discrete key press.

    `char` is only set for KeyCode.CHAR.
    """

    code: KeyCode
    char: str | None = None

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, char)


ENTER = KeyEvent(KeyCode.ENTER)
BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
ESCAPE = KeyEvent(KeyCode.ESCAPE)
UP = KeyEvent(KeyCode.UP)
DOWN = KeyEvent(KeyCode.DOWN)
UNKNOWN = KeyEvent(KeyCode.UNKNOWN)

# POSIX terminals send CSI/SS3 sequences; Windows getwch() sends a \xe0 or \x00 prefix.
_SEQUENCES: dict[str, KeyEvent] = {
    "\r": ENTER,
    "\n": ENTER,
    "\r\n": ENTER,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
    "\x1b": ESCAPE,
    "\x1b[A": UP,
    "\x1b[B": DOWN,
    "\x1bOA": UP,
    "\x1bOB": DOWN,
    "\xe0H": UP,
    "\xe0P": DOWN,
    "\x00H": UP,
    "\x00P": DOWN,
}


def decode_key(raw: str) -> KeyEvent:
    """Translate the raw input for a single key into a KeyEvent.

    Anything that is neither a known sequence nor a single printable
    character decodes to UNKNOWN, which every mode ignores. Use
    decode_keys for input that may hold several keys.
    """
    event = _SEQUENCES.get(raw)
    if event is not None:
        return event
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent.of_char(raw)
    return UNKNOWN


# Splits a POSIX input chunk into escape sequences, CRLF, and single characters.
_TOKEN_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z~]|\x1bO[A-Za-z]|\r\n|.", re.DOTALL)


def decode_keys(raw: str) -> list[KeyEvent]:
    """Translate a chunk of raw terminal input into one KeyEvent per key.

    click.getchar returns whatever one read() produced, so pasted text or
    fast typing arrives as several keys at once. A chunk that is exactly a
    known sequence (including the two-character Windows codes) is one key.
    """
    event = _SEQUENCES.get(raw)
    if event is not None:
        return [event]
    return [decode_key(token) for token in _TOKEN_RE.findall(raw)]


def read_keys(getchar: Callable[[], str] = click.getchar) -> list[KeyEvent]:
    """Block until the next terminal input and decode every key in it.

    click.getchar raises KeyboardInterrupt on Ctrl-C and EOFError on Ctrl-D;
    both propagate to the caller.
    """
    return decode_keys(getchar())
