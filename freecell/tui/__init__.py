"""
Terminal front end - key decoding, rendering and the interactive loop.
"""

from .keys import Key, decode_keys, intent_for_key, key_from_curses
from .render import CursesRenderer, render_text
from .app import TerminalApp, play

__all__ = [
    "Key",
    "decode_keys",
    "intent_for_key",
    "key_from_curses",
    "CursesRenderer",
    "render_text",
    "TerminalApp",
    "play",
]
