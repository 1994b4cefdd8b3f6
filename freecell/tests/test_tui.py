"""
Tests for the terminal front end that do not need a real terminal.

Tests:
- Raw byte decoding and curses key mapping
- Key to intent bindings
- Quit confirmation
- Plain-text rendering
"""

import curses

from ..api.schemas import EngineSnapshot
from ..engine_core.board import Board, Slot
from ..engine_core.cards import Rank, SUITS
from ..engine_core.engine import Engine
from ..engine_core.intent import Direction, Intent, IntentType
from ..tui.app import QUIT_PROMPT, WIN_BANNER, TerminalApp
from ..tui.keys import Key, decode_keys, intent_for_key, key_from_curses
from ..tui.render import render_text
from .conftest import SEED


class TestDecodeKeys:
    """Tests for raw byte decoding."""

    def test_plain_keys(self):
        assert decode_keys(b"q yN\rU") == [Key.Q, Key.SPACE, Key.Y, Key.N, Key.ENTER, Key.U]

    def test_arrow_sequences(self):
        assert decode_keys(b"\x1b[A\x1b[B\x1b[C\x1b[D") == [
            Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_RIGHT, Key.ARROW_LEFT,
        ]

    def test_unknown_byte_drops_rest(self):
        assert decode_keys(b" \x00 q") == [Key.SPACE, Key.UNKNOWN]

    def test_lone_escape_is_unknown(self):
        assert decode_keys(b"\x1b") == [Key.UNKNOWN]

    def test_empty_input(self):
        assert decode_keys(b"") == []


class TestCursesKeys:
    """Tests for curses key codes."""

    def test_special_keys(self):
        assert key_from_curses(curses.KEY_UP) is Key.ARROW_UP
        assert key_from_curses(curses.KEY_RESIZE) is Key.RESIZE
        assert key_from_curses(curses.KEY_ENTER) is Key.ENTER

    def test_characters(self):
        assert key_from_curses(ord(" ")) is Key.SPACE
        assert key_from_curses(10) is Key.ENTER
        assert key_from_curses(ord("u")) is Key.U
        assert key_from_curses(ord("z")) is Key.UNKNOWN
        assert key_from_curses(-1) is Key.UNKNOWN


class TestBindings:
    """Tests for key to intent bindings."""

    def test_bound_keys(self):
        assert intent_for_key(Key.ARROW_LEFT) == Intent.move_cursor(Direction.LEFT)
        assert intent_for_key(Key.SPACE).intent_type is IntentType.TOGGLE_SELECT
        assert intent_for_key(Key.ENTER) == Intent.send_to_foundation()
        assert intent_for_key(Key.U).intent_type is IntentType.UNDO

    def test_front_end_keys_are_unbound(self):
        for key in (Key.Q, Key.Y, Key.N, Key.RESIZE, Key.UNKNOWN):
            assert intent_for_key(key) is None


class TestTerminalApp:
    """Tests for key handling and quit confirmation."""

    def test_quit_needs_confirmation(self, seeded_engine):
        app = TerminalApp(seeded_engine)
        app.handle_key(Key.Q)
        assert app.running
        assert app.banner() == QUIT_PROMPT
        app.handle_key(Key.Y)
        assert not app.running

    def test_quit_can_be_cancelled(self, seeded_engine):
        app = TerminalApp(seeded_engine)
        app.handle_key(Key.Q)
        app.handle_key(Key.SPACE)
        assert seeded_engine.selection is None
        app.handle_key(Key.N)
        assert app.running
        assert app.banner() is None

    def test_keys_drive_the_engine(self, seeded_engine):
        app = TerminalApp(seeded_engine)
        for key in decode_keys(b" \x1b[A "):
            app.handle_key(key)
        assert seeded_engine.moves_made == 1
        assert seeded_engine.board.cells[0] is not None

    def test_win_banner(self):
        engine = Engine(Board.from_cascades([], foundations={suit: Rank.KING for suit in SUITS}))
        assert TerminalApp(engine).banner() == WIN_BANNER

    def test_status_line(self, seeded_engine):
        assert TerminalApp(seeded_engine).status().startswith("Moves made: 0")


class TestRenderText:
    """Tests for the plain-text renderer."""

    def test_dealt_layout(self, seeded_engine):
        lines = render_text(EngineSnapshot.from_engine(seeded_engine))
        assert lines[0].count("[   ]") == 8
        assert lines[-1] == f"Seed = {SEED}  Moves = 0"
        # top row, cell cursor line, 7 cascade rows, cascade cursor line, status
        assert len(lines) == 11
        assert lines[-2].startswith(" ^^^^^")

    def test_selection_marker(self, seeded_engine):
        seeded_engine.apply(Intent.select(Slot.cascade(0)))
        lines = render_text(EngineSnapshot.from_engine(seeded_engine))
        assert lines[8].startswith(">[")
        assert ">" not in lines[2]

    def test_empty_cascade_placeholder(self):
        lines = render_text(EngineSnapshot.from_engine(Engine(Board.empty())))
        assert lines[2].count("<...>") == 8
        assert lines[-1] == "Seed = -  Moves = 0"
