"""
Tests for the Board aggregate and slots.
"""

import pytest

from ..engine_core.board import Board, Slot, SlotKind, MAX_CASCADE_LENGTH
from ..engine_core.cards import Card, Rank, Suit
from ..engine_core.deal import deal
from .conftest import cards


class TestSlot:
    """Tests for slot references."""

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Slot.cell(4)
        with pytest.raises(ValueError):
            Slot.cascade(8)
        with pytest.raises(ValueError):
            Slot(SlotKind.CASCADE, -1)

    def test_foundation_slot_suit(self):
        assert Slot.foundation(Suit.CLUBS).suit is Suit.CLUBS
        with pytest.raises(ValueError):
            Slot.cell(0).suit


class TestBoardAccess:
    """Tests for reading slots."""

    def test_empty_board(self):
        board = Board.empty()
        assert board.empty_cells() == 4
        assert board.empty_cascades() == 8
        assert board.is_empty(Slot.cell(0))
        assert board.peek_top(Slot.cascade(3)) is None
        assert board.foundation_rank(Suit.HEARTS) is None

    def test_peek_top_reads_last_card(self):
        board = Board.from_cascades([cards("KS QH")], cells=[None, Card.parse("5D")])
        assert board.peek_top(Slot.cascade(0)) == Card.parse("QH")
        assert board.peek_top(Slot.cell(1)) == Card.parse("5D")
        assert board.empty_cells() == 3
        assert board.empty_cascades() == 7

    def test_foundation_peek(self):
        board = Board.from_cascades([], foundations={Suit.SPADES: Rank.THREE})
        assert board.peek_top(Slot.foundation(Suit.SPADES)) == Card.parse("3S")
        assert board.is_empty(Slot.foundation(Suit.HEARTS))


class TestBoardMutation:
    """Tests for the mutating primitives."""

    def test_remove_and_append_cascade(self):
        board = Board.from_cascades([cards("KS QH JC"), cards("8D")])
        taken = board.remove_top(Slot.cascade(0), 2)
        assert taken == cards("QH JC")
        assert board.cascade(0) == cards("KS")
        board.append(Slot.cascade(1), taken)
        assert board.cascade(1) == cards("8D QH JC")

    def test_cell_holds_one_card(self):
        board = Board.from_cascades([], cells=[Card.parse("5D")])
        with pytest.raises(ValueError):
            board.append(Slot.cell(0), cards("6S"))
        with pytest.raises(ValueError):
            board.append(Slot.cell(1), cards("6S 7S"))
        assert board.remove_top(Slot.cell(0)) == cards("5D")
        assert board.cells[0] is None

    def test_remove_too_many_rejected(self):
        board = Board.from_cascades([cards("KS")])
        with pytest.raises(ValueError):
            board.remove_top(Slot.cascade(0), 2)
        with pytest.raises(ValueError):
            board.remove_top(Slot.cell(0))

    def test_foundation_only_grows(self):
        board = Board.empty()
        board.append(Slot.foundation(Suit.HEARTS), cards("AH"))
        board.accept(Card.parse("2H"))
        assert board.foundation_rank(Suit.HEARTS) is Rank.TWO
        with pytest.raises(ValueError):
            board.remove_top(Slot.foundation(Suit.HEARTS))

    def test_cascade_length_ceiling(self):
        with pytest.raises(AssertionError):
            Board.from_cascades([cards("AH") * (MAX_CASCADE_LENGTH + 1)])

    def test_copy_is_independent(self):
        board = Board.from_cascades([cards("KS QH")], cells=cards("5D"))
        clone = board.copy()
        clone.remove_top(Slot.cascade(0))
        clone.remove_top(Slot.cell(0))
        clone.accept(Card.parse("AC"))
        assert board.cascade(0) == cards("KS QH")
        assert board.cells[0] == Card.parse("5D")
        assert board.foundation_rank(Suit.CLUBS) is None
        assert clone != board


class TestConservation:
    """Tests for the full-deck invariant helper."""

    def test_dealt_board_is_complete(self):
        assert deal(1234567).is_complete_deck()

    def test_missing_card_detected(self):
        board = deal(1234567)
        board.remove_top(Slot.cascade(0))
        assert not board.is_complete_deck()

    def test_foundations_count_as_cards(self):
        board = deal(1234567)
        ace = Card.parse("AH")
        for pile in board.cascades:
            if ace in pile:
                pile.remove(ace)
        board.accept(ace)
        assert board.is_complete_deck()
