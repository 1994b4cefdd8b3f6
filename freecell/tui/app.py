"""
Terminal front end - the interactive loop around an Engine.

One loop handles every event in order: draw a frame, read a key, apply
it. A terminal resize arrives as just another key (KEY_RESIZE) and only
triggers a redraw, so the engine is never touched outside the loop.
"""

from __future__ import annotations
import curses
import logging

from ..api.schemas import EngineSnapshot
from ..engine_core import Engine, legal_moves
from .keys import Key, intent_for_key, key_from_curses
from .render import CursesRenderer

logger = logging.getLogger(__name__)

QUIT_PROMPT = "QUIT? (y/n)"
WIN_BANNER = "YOU WON! Press any key."


class TerminalApp:
    """Key handling and quit confirmation for one game."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.quit_confirmation = False
        self.running = True

    def handle_key(self, key: Key) -> None:
        """Process one key. Quitting needs a second, confirming key."""
        if self.quit_confirmation:
            if key is Key.Y:
                self.running = False
            elif key is Key.N:
                self.quit_confirmation = False
            return

        if key is Key.Q:
            self.quit_confirmation = True
            return

        intent = intent_for_key(key)
        if intent is None:
            return
        result = self.engine.apply(intent)
        if result.applied:
            logger.debug("%s: %s", key.value, "; ".join(result.changes))

    def banner(self) -> str | None:
        if self.quit_confirmation:
            return QUIT_PROMPT
        if self.engine.won:
            return WIN_BANNER
        return None

    def status(self) -> str:
        available = len(legal_moves(self.engine.board))
        return f"Moves made: {self.engine.moves_made}   Legal moves: {available}"

    def run(self, stdscr) -> None:
        curses.curs_set(0)
        stdscr.keypad(True)
        renderer = CursesRenderer(stdscr)
        renderer.init_colors()
        logger.info("Terminal size %s", stdscr.getmaxyx())

        while self.running:
            renderer.draw(EngineSnapshot.from_engine(self.engine), banner=self.banner(), status=self.status())
            if self.engine.won and not self.quit_confirmation:
                stdscr.getch()
                break
            key = key_from_curses(stdscr.getch())
            if key is Key.RESIZE:
                continue
            self.handle_key(key)


def play(engine: Engine) -> None:
    """Run an interactive game until the player quits or wins."""
    app = TerminalApp(engine)
    curses.wrapper(app.run)
    logger.info("Bye!")
