"""
Move Generator - Enumerates every legal move on a board.

Used by:
1. The terminal front end (available-move count in the status line)
2. Tests that play random legal games and check board invariants

Moves into empty cells and empty cascades are interchangeable, so only
the first empty cell and the first empty cascade are offered.
"""

from __future__ import annotations

from .board import Board, Slot, NUM_CASCADES, NUM_CELLS
from .rules import Move, plan_foundation_move, plan_move


def legal_moves(board: Board) -> list[Move]:
    """Generate all distinct legal moves, foundation moves first."""
    sources = [Slot.cell(i) for i in range(NUM_CELLS)]
    sources += [Slot.cascade(j) for j in range(NUM_CASCADES)]
    sources = [slot for slot in sources if not board.is_empty(slot)]

    moves: list[Move] = []
    for source in sources:
        move = plan_foundation_move(board, source)
        if move is not None:
            moves.append(move)

    destinations = _destinations(board)
    for source in sources:
        for destination in destinations:
            move = plan_move(board, source, destination)
            if move is not None:
                moves.append(move)
    return moves


def _destinations(board: Board) -> list[Slot]:
    slots: list[Slot] = []
    # Only an empty cell can receive a card.
    for i in range(NUM_CELLS):
        if board.cells[i] is None:
            slots.append(Slot.cell(i))
            break

    seen_empty_cascade = False
    for j in range(NUM_CASCADES):
        if not board.cascades[j]:
            if seen_empty_cascade:
                continue
            seen_empty_cascade = True
        slots.append(Slot.cascade(j))
    return slots
