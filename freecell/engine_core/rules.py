"""
Rules - Move legality, supermove capacity and victory.

All functions here are pure: they read a Board and answer a question,
or (apply_move) return a new Board leaving the input untouched.

Legality is expressed as a Move plan. plan_move() returns the Move the
rules allow between two slots, or None when nothing may move. A None is
routine during play and is never raised as an error.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .board import Board, Slot, SlotKind
from .cards import Card, Rank, SUITS


@dataclass(frozen=True)
class Move:
    """A validated relocation of `count` cards from source to destination."""
    source: Slot
    destination: Slot
    count: int = 1

    def __str__(self) -> str:
        plural = "card" if self.count == 1 else "cards"
        return f"{self.count} {plural} {self.source} -> {self.destination}"


def can_stack(card: Card, onto: Card) -> bool:
    """True iff `card` may sit directly on `onto` in a cascade."""
    return card.color != onto.color and card.rank + 1 == onto.rank


def foundation_accepts(card: Card, foundation_rank: Rank | None) -> bool:
    """True iff `card` is the next card for a foundation topped by `foundation_rank`."""
    if foundation_rank is None:
        return card.rank == Rank.ACE
    return card.rank == foundation_rank + 1


def run_length(cascade: Sequence[Card]) -> int:
    """
    Length of the alternating-color, descending-by-one run at the top.

    The top card alone counts as 1; an empty cascade has no run.
    """
    if not cascade:
        return 0
    length = 1
    i = len(cascade) - 1
    while i > 0 and can_stack(cascade[i], cascade[i - 1]):
        length += 1
        i -= 1
    return length


def supermove_capacity(empty_cascades: int, empty_cells: int, to_empty_cascade: bool) -> int:
    """
    Maximum number of cards that may move together between cascades.

    Every empty cascade doubles the capacity and every empty cell adds one
    to the base. An empty destination cannot help carry its own move, so
    it is left out of the doubling; with no other empty cascade the move
    is limited to what the free cells alone allow.
    """
    doublings = empty_cascades
    if to_empty_cascade:
        doublings = max(empty_cascades - 1, 0)
    return (2 ** doublings) * (empty_cells + 1)


def plan_move(board: Board, source: Slot, destination: Slot) -> Move | None:
    """Work out the move from `source` to `destination`, or None if illegal."""
    if source == destination or board.is_empty(source):
        return None

    if destination.kind is SlotKind.FOUNDATION:
        move = plan_foundation_move(board, source)
        if move is not None and move.destination == destination:
            return move
        return None

    if source.kind is SlotKind.CASCADE and destination.kind is SlotKind.CASCADE:
        return _plan_cascade_move(board, source, destination)

    if source.kind is SlotKind.CASCADE and destination.kind is SlotKind.CELL:
        if not board.is_empty(destination):
            return None
        return Move(source, destination, 1)

    if source.kind is SlotKind.CELL and destination.kind is SlotKind.CASCADE:
        card = board.peek_top(source)
        target = board.peek_top(destination)
        if target is None or can_stack(card, target):
            return Move(source, destination, 1)
        return None

    # Cell to cell and moves out of a foundation are not part of the game.
    return None


def _plan_cascade_move(board: Board, source: Slot, destination: Slot) -> Move | None:
    pile = board.cascade(source.index)
    target = board.peek_top(destination)
    capacity = supermove_capacity(
        board.empty_cascades(),
        board.empty_cells(),
        to_empty_cascade=target is None,
    )
    limit = min(run_length(pile), capacity)

    if target is None:
        return Move(source, destination, limit)

    for count in range(1, limit + 1):
        if can_stack(pile[-count], target):
            return Move(source, destination, count)
    return None


def plan_foundation_move(board: Board, source: Slot) -> Move | None:
    """The move sending the top card of `source` home, or None."""
    if source.kind is SlotKind.FOUNDATION:
        return None
    card = board.peek_top(source)
    if card is None:
        return None
    if not foundation_accepts(card, board.foundation_rank(card.suit)):
        return None
    return Move(source, Slot.foundation(card.suit), 1)


def apply_move(board: Board, move: Move) -> Board:
    """Return a new board with `move` carried out. `board` is not modified."""
    new_board = board.copy()
    cards = new_board.remove_top(move.source, move.count)
    new_board.append(move.destination, cards)
    return new_board


def is_won(board: Board) -> bool:
    """True iff every foundation holds its King."""
    return all(board.foundation_rank(suit) == Rank.KING for suit in SUITS)
