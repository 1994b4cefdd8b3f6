"""
Key decoding - raw terminal input to Key values, and Key values to Intents.

Bindings:
    arrow keys .. move cursor
    space ....... select / deselect / move
    enter ....... send to foundation
    u ........... undo
    q ........... quit (asks y/n)
"""

from __future__ import annotations
import curses
from enum import Enum
import logging

from ..engine_core import Direction, Intent

logger = logging.getLogger(__name__)


class Key(Enum):
    """Keys the front end reacts to."""
    UNKNOWN = "unknown"
    Q = "q"
    Y = "y"
    N = "n"
    U = "u"
    SPACE = "space"
    ENTER = "enter"
    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"
    RESIZE = "resize"


_CHAR_KEYS = {
    ord("q"): Key.Q, ord("Q"): Key.Q,
    ord("y"): Key.Y, ord("Y"): Key.Y,
    ord("n"): Key.N, ord("N"): Key.N,
    ord("u"): Key.U, ord("U"): Key.U,
    ord(" "): Key.SPACE,
    ord("\r"): Key.ENTER,
    ord("\n"): Key.ENTER,
}

_ESCAPE_KEYS = {
    b"\x1b[A": Key.ARROW_UP,
    b"\x1b[B": Key.ARROW_DOWN,
    b"\x1b[C": Key.ARROW_RIGHT,
    b"\x1b[D": Key.ARROW_LEFT,
}

_CURSES_KEYS = {
    curses.KEY_UP: Key.ARROW_UP,
    curses.KEY_DOWN: Key.ARROW_DOWN,
    curses.KEY_LEFT: Key.ARROW_LEFT,
    curses.KEY_RIGHT: Key.ARROW_RIGHT,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_RESIZE: Key.RESIZE,
}

_KEY_INTENTS = {
    Key.ARROW_UP: Intent.move_cursor(Direction.UP),
    Key.ARROW_DOWN: Intent.move_cursor(Direction.DOWN),
    Key.ARROW_LEFT: Intent.move_cursor(Direction.LEFT),
    Key.ARROW_RIGHT: Intent.move_cursor(Direction.RIGHT),
    Key.SPACE: Intent.toggle_select(),
    Key.ENTER: Intent.send_to_foundation(),
    Key.U: Intent.undo(),
}


def decode_keys(data: bytes) -> list[Key]:
    """
    Split a buffer read from a raw-mode terminal into keys.

    An unrecognised byte produces Key.UNKNOWN and the rest of the
    buffer is dropped, since its boundaries can no longer be trusted.
    """
    keys: list[Key] = []
    pos = 0
    while pos < len(data):
        escape = data[pos:pos + 3]
        if escape in _ESCAPE_KEYS:
            keys.append(_ESCAPE_KEYS[escape])
            pos += 3
            continue
        key = _CHAR_KEYS.get(data[pos])
        if key is None:
            logger.debug("Unhandled input bytes: %s", list(data[pos:]))
            keys.append(Key.UNKNOWN)
            break
        keys.append(key)
        pos += 1
    return keys


def key_from_curses(code: int) -> Key:
    """Map a curses getch() code to a Key."""
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    return _CHAR_KEYS.get(code, Key.UNKNOWN)


def intent_for_key(key: Key) -> Intent | None:
    """The game intent bound to `key`, or None for keys the front end handles itself."""
    return _KEY_INTENTS.get(key)
