"""
Tests for the card model.
"""

import pytest

from ..engine_core.cards import Card, Color, Rank, Suit, full_deck


class TestSuitAndRank:
    """Tests for suit colors and rank neighbours."""

    def test_suit_colors(self):
        assert Suit.HEARTS.color is Color.RED
        assert Suit.DIAMONDS.color is Color.RED
        assert Suit.CLUBS.color is Color.BLACK
        assert Suit.SPADES.color is Color.BLACK

    def test_suit_index_is_foundation_order(self):
        assert [s.index for s in (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)] == [0, 1, 2, 3]

    def test_rank_neighbours(self):
        assert Rank.ACE.successor is Rank.TWO
        assert Rank.ACE.predecessor is None
        assert Rank.KING.successor is None
        assert Rank.KING.predecessor is Rank.QUEEN

    def test_rank_labels(self):
        assert Rank.ACE.label == " A"
        assert Rank.TEN.label == "10"
        assert Rank.KING.label == " K"


class TestCard:
    """Tests for Card parsing and identity."""

    def test_parse_forms(self):
        assert Card.parse("10D") == Card(Suit.DIAMONDS, Rank.TEN)
        assert Card.parse("TH") == Card(Suit.HEARTS, Rank.TEN)
        assert Card.parse("as") == Card(Suit.SPADES, Rank.ACE)
        assert Card.parse("QC") == Card(Suit.CLUBS, Rank.QUEEN)

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "14H", "KK"])
    def test_parse_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            Card.parse(text)

    def test_label(self):
        assert Card.parse("AS").label == " A♠"
        assert str(Card.parse("10H")) == "10♥"

    def test_cards_are_hashable_values(self):
        assert len({Card.parse("7S"), Card.parse("7S"), Card.parse("7C")}) == 2

    def test_full_deck(self):
        deck = list(full_deck())
        assert len(deck) == 52
        assert len(set(deck)) == 52
        assert deck[0] == Card.parse("AH")
        assert deck[-1] == Card.parse("KS")
