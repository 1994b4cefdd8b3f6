"""
Tests for legal move enumeration.
"""

from ..engine_core.board import Board, Slot, SlotKind
from ..engine_core.cards import Suit
from ..engine_core.deal import deal
from ..engine_core.move_generator import legal_moves
from ..engine_core.rules import Move, plan_move
from .conftest import cards


class TestLegalMoves:
    """Tests for legal_moves."""

    def test_empty_board_has_no_moves(self):
        assert legal_moves(Board.empty()) == []

    def test_every_generated_move_is_legal(self):
        board = deal(1234567)
        moves = legal_moves(board)
        assert moves
        for move in moves:
            assert plan_move(board, move.source, move.destination) == move

    def test_only_first_empty_cell_offered(self):
        board = deal(1234567)
        cell_moves = [m for m in legal_moves(board) if m.destination.kind is SlotKind.CELL]
        assert len(cell_moves) == 8
        assert {m.destination for m in cell_moves} == {Slot.cell(0)}

    def test_foundation_moves_listed_first(self):
        board = Board.from_cascades([cards("9C AS"), cards("5D")])
        moves = legal_moves(board)
        assert moves[0] == Move(Slot.cascade(0), Slot.foundation(Suit.SPADES), 1)

    def test_only_first_empty_cascade_offered(self):
        board = Board.from_cascades([cards("9C")], cells=cards("2H 3H 4H 5H"))
        moves = legal_moves(board)
        assert Move(Slot.cascade(0), Slot.cascade(1), 1) in moves
        assert all(m.destination != Slot.cascade(2) for m in moves)
