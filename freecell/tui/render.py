"""
Rendering - draws an EngineSnapshot as text lines or on a curses screen.

Layout (both renderers):
    free cells on the left of the top row, foundations on the right
    the eight cascades below, bottom card first
    a marker under the slot at the cursor, brackets around the selection
"""

from __future__ import annotations
import curses

from ..api.schemas import CardColor, CardInfo, EngineSnapshot

CARD_WIDTH = 5
COLUMN_WIDTH = 7
CELL_ROW = 0

HELP_LINES = [
    "[arrow keys]: move cursor",
    "[space]: select/deselect/move",
    "[enter]: send to foundation",
    "[u]: undo",
    "[q]: quit",
]


def card_text(card: CardInfo | None) -> str:
    """Five-column cell text for a card or an empty slot."""
    if card is None:
        return "[   ]"
    return f"[{card.label}]".ljust(CARD_WIDTH)


def _mark(text: str, selected: bool) -> str:
    if not selected:
        return f" {text} "
    return f">{text}<"


def render_text(snapshot: EngineSnapshot) -> list[str]:
    """Render a snapshot as plain lines (no colors, no cursor addressing)."""
    board = snapshot.board
    lines: list[str] = []

    top = "".join(
        _mark(card_text(card), snapshot.is_selected("cell", i))
        for i, card in enumerate(board.cells)
    )
    top += "   " + "".join(f" {card_text(card)} " for card in board.foundations)
    lines.append(top)
    lines.append(_cursor_line(snapshot, CELL_ROW))

    depth = max((len(pile) for pile in board.cascades), default=0)
    for row in range(max(depth, 1)):
        cells = []
        for j, pile in enumerate(board.cascades):
            if row < len(pile):
                is_top = row == len(pile) - 1
                cells.append(_mark(card_text(pile[row]), is_top and snapshot.is_selected("cascade", j)))
            elif row == 0:
                cells.append(" <...> ")
            else:
                cells.append(" " * COLUMN_WIDTH)
        lines.append("".join(cells).rstrip())
    lines.append(_cursor_line(snapshot, 1))

    status = f"Seed = {snapshot.seed}" if snapshot.seed is not None else "Seed = -"
    status += f"  Moves = {snapshot.moves_made}"
    if snapshot.won:
        status += "  YOU WON!"
    lines.append(status)
    return [line.rstrip() for line in lines]


def _cursor_line(snapshot: EngineSnapshot, row: int) -> str:
    if snapshot.cursor.row != row:
        return ""
    return " " * (snapshot.cursor.col * COLUMN_WIDTH) + " ^^^^^"


class CursesRenderer:
    """Draws snapshots onto a curses window."""

    # color pairs: 1 black card, 2 red card, 3 empty slot, 4 cursor/selection, 5 banner
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def init_colors(self):
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_WHITE)
        curses.init_pair(2, curses.COLOR_RED, curses.COLOR_WHITE)
        curses.init_pair(3, curses.COLOR_GREEN, -1)
        curses.init_pair(4, curses.COLOR_YELLOW, -1)
        curses.init_pair(5, curses.COLOR_WHITE, curses.COLOR_RED)

    def draw(self, snapshot: EngineSnapshot, banner: str | None = None, status: str = ""):
        self.stdscr.erase()
        maxy, maxx = self.stdscr.getmaxyx()
        width = 8 * COLUMN_WIDTH + 3
        x0 = max(0, (maxx - width) // 2)
        y0 = 1
        board = snapshot.board

        for i, card in enumerate(board.cells):
            self._card(y0, x0 + 1 + COLUMN_WIDTH * i, card, snapshot.is_selected("cell", i))
        for i, card in enumerate(board.foundations):
            self._card(y0, x0 + width - COLUMN_WIDTH * (4 - i), card, False)
        if snapshot.cursor.row == CELL_ROW:
            self._put(y0 + 1, x0 + COLUMN_WIDTH * snapshot.cursor.col, " ^^^^^", curses.color_pair(4))

        top = y0 + 3
        for j, pile in enumerate(board.cascades):
            x = x0 + 1 + COLUMN_WIDTH * j
            if not pile:
                self._put(top, x, " <...>", curses.color_pair(3))
            for row, card in enumerate(pile):
                selected = row == len(pile) - 1 and snapshot.is_selected("cascade", j)
                self._card(top + row, x, card, selected)
        if snapshot.cursor.row != CELL_ROW:
            depth = len(board.cascades[snapshot.cursor.col])
            self._put(top + max(depth, 1), x0 + COLUMN_WIDTH * snapshot.cursor.col, " ^^^^^", curses.color_pair(4))

        footer = top + 21
        for k, line in enumerate(HELP_LINES):
            self._put(footer + k, x0, line, 0)
        self._put(footer, x0 + width - 16, f"Seed = {snapshot.seed}", 0)
        if status:
            self._put(footer + len(HELP_LINES) + 1, x0, status[:max(0, maxx - x0 - 1)], curses.color_pair(3))
        if banner:
            self._banner(banner)
        self.stdscr.refresh()

    def _card(self, y: int, x: int, card: CardInfo | None, selected: bool):
        if card is None:
            attr = curses.color_pair(3)
        elif card.color is CardColor.RED:
            attr = curses.color_pair(2) | curses.A_BOLD
        else:
            attr = curses.color_pair(1) | curses.A_BOLD
        if selected:
            attr |= curses.A_REVERSE
        self._put(y, x, card_text(card), attr)

    def _banner(self, msg: str):
        maxy, maxx = self.stdscr.getmaxyx()
        text = f"  {msg}  "
        self._put(maxy // 2, max(0, (maxx - len(text)) // 2), text, curses.color_pair(5) | curses.A_BOLD)

    def _put(self, y: int, x: int, text: str, attr: int):
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Off-screen writes are skipped when the terminal is too small.
            pass
