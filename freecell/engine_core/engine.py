"""
Engine - Owns all mutable game state and applies intents to it.

The engine is the single point of state mutation. All changes go
through apply(), one intent at a time, to completion.

State machine:
- Idle (no selection) / Selected(slot)
- ToggleSelect on a non-empty slot while Idle selects it
- ToggleSelect on the selected slot deselects it
- ToggleSelect on another slot attempts the move; success returns to
  Idle, failure keeps the selection
- SendToFoundation works in either state; it deselects only when the
  card left the selected slot
- Undo restores the previous snapshot and always returns to Idle

Boards are never edited in place: a move builds a new board and the
history commit replaces the current one, so readers always see a
consistent snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Callable

from .board import Board, Slot, SlotKind, NUM_CASCADES, NUM_CELLS
from .deal import deal
from .history import History, DEFAULT_CAPACITY
from .intent import Direction, Intent, IntentResult, IntentType
from .rules import Move, apply_move, is_won, plan_foundation_move, plan_move

logger = logging.getLogger(__name__)

CELL_ROW = 0
CASCADE_ROW = 1


@dataclass(frozen=True)
class Cursor:
    """Position of the player's cursor: row 0 is the free cells, row 1 the cascades."""
    row: int = CASCADE_ROW
    col: int = 0

    @property
    def slot(self) -> Slot:
        if self.row == CELL_ROW:
            return Slot.cell(self.col)
        return Slot.cascade(self.col)

    def moved(self, direction: Direction) -> Cursor:
        """Return the cursor after one step in `direction`, clamped to the layout."""
        row, col = self.row, self.col
        if direction is Direction.UP and row > CELL_ROW:
            row = CELL_ROW
            col = min(col, NUM_CELLS - 1)
        elif direction is Direction.DOWN and row < CASCADE_ROW:
            row = CASCADE_ROW
        elif direction is Direction.LEFT and col > 0:
            col -= 1
        elif direction is Direction.RIGHT:
            last = NUM_CELLS - 1 if row == CELL_ROW else NUM_CASCADES - 1
            if col < last:
                col += 1
        return Cursor(row, col)


class Engine:
    """
    A single game of Freecell.

    Usage:
        engine = Engine.from_seed(1234567)
        engine.apply(Intent.toggle_select())
        engine.apply(Intent.move_cursor(Direction.RIGHT))
        engine.apply(Intent.toggle_select())
        if engine.won:
            ...
    """

    def __init__(self, board: Board, history_size: int = DEFAULT_CAPACITY, seed: int | None = None):
        self.seed = seed
        self._history = History(board, capacity=history_size)
        self._selection: Slot | None = None
        self._cursor = Cursor()
        self._handlers: dict[IntentType, Callable[[Intent], IntentResult]] = {
            IntentType.MOVE_CURSOR: self._handle_move_cursor,
            IntentType.TOGGLE_SELECT: self._handle_toggle_select,
            IntentType.SELECT: self._handle_select,
            IntentType.DESELECT: self._handle_deselect,
            IntentType.MOVE: self._handle_move,
            IntentType.SEND_TO_FOUNDATION: self._handle_send_to_foundation,
            IntentType.UNDO: self._handle_undo,
        }

    @classmethod
    def from_seed(cls, seed: int, history_size: int = DEFAULT_CAPACITY) -> Engine:
        """Deal a new game for `seed`."""
        logger.info("Dealing game %d", seed)
        return cls(deal(seed), history_size=history_size, seed=seed)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        """The current board. Do not mutate."""
        return self._history.current

    @property
    def selection(self) -> Slot | None:
        return self._selection

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def won(self) -> bool:
        return is_won(self.board)

    @property
    def moves_made(self) -> int:
        return self._history.depth

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo()

    # ------------------------------------------------------------------
    # Intent application
    # ------------------------------------------------------------------

    def apply(self, intent: Intent) -> IntentResult:
        """Apply one intent. Illegal play yields a no-op result, never an exception."""
        handler = self._handlers[intent.intent_type]
        was_won = self.won
        result = handler(intent)
        result.won = self.won
        if result.won and not was_won:
            logger.info("Game %s won after %d moves", self.seed, self.moves_made)
        return result

    def _handle_move_cursor(self, intent: Intent) -> IntentResult:
        moved = self._cursor.moved(intent.direction)
        if moved == self._cursor:
            return IntentResult.noop()
        self._cursor = moved
        return IntentResult.done(f"Cursor at {moved.slot}")

    def _handle_toggle_select(self, intent: Intent) -> IntentResult:
        slot = self._cursor.slot
        if self._selection is None:
            return self._select(slot)
        if self._selection == slot:
            return self._handle_deselect(intent)
        return self._attempt(self._selection, slot)

    def _handle_select(self, intent: Intent) -> IntentResult:
        return self._select(intent.source)

    def _handle_deselect(self, intent: Intent) -> IntentResult:
        if self._selection is None:
            return IntentResult.noop()
        previous, self._selection = self._selection, None
        return IntentResult.done(f"Deselected {previous}")

    def _handle_move(self, intent: Intent) -> IntentResult:
        return self._attempt(intent.source, intent.destination)

    def _handle_send_to_foundation(self, intent: Intent) -> IntentResult:
        slot = intent.source or self._cursor.slot
        move = plan_foundation_move(self.board, slot)
        if move is None:
            return IntentResult.noop()
        self._commit(move)
        if self._selection == slot:
            self._selection = None
        return IntentResult.done(f"Moved {move}", move=move)

    def _handle_undo(self, intent: Intent) -> IntentResult:
        if self._history.undo() is None:
            return IntentResult.noop()
        self._selection = None
        logger.debug("Undo, %d step(s) left", self._history.depth)
        return IntentResult.done("Undid last move")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _select(self, slot: Slot) -> IntentResult:
        if slot.kind is SlotKind.FOUNDATION or self.board.is_empty(slot):
            return IntentResult.noop()
        self._selection = slot
        return IntentResult.done(f"Selected {slot}")

    def _attempt(self, source: Slot, destination: Slot) -> IntentResult:
        move = plan_move(self.board, source, destination)
        if move is None:
            logger.debug("Rejected move %s -> %s", source, destination)
            return IntentResult.noop()
        self._commit(move)
        self._selection = None
        return IntentResult.done(f"Moved {move}", move=move)

    def _commit(self, move: Move) -> None:
        self._history.commit(apply_move(self.board, move))
        logger.debug("Committed %s", move)
