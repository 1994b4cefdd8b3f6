"""
Card Model - Suits, ranks and the immutable Card value type.

Everything above this module relies on two primitive relations:
- opposite color (Suit.color)
- rank predecessor (Rank.predecessor / Rank.successor)

Cards are compared by exact (suit, rank) equality. A standard deck
has no duplicates, so a Card doubles as its own identity.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator


class Color(Enum):
    """Card colors."""
    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """The four suits, in foundation order."""
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def index(self) -> int:
        """Position of this suit's foundation (0..3)."""
        return _SUIT_ORDER.index(self)


_SUIT_ORDER = [Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES]
_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    """Card ranks, Ace low."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def successor(self) -> Rank | None:
        if self is Rank.KING:
            return None
        return Rank(self + 1)

    @property
    def predecessor(self) -> Rank | None:
        if self is Rank.ACE:
            return None
        return Rank(self - 1)

    @property
    def label(self) -> str:
        """Two-character label, right aligned (' A', '10', ' K')."""
        return _RANK_LABELS[self].rjust(2)


_RANK_LABELS = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K",
}
_RANK_PARSE = {label: rank for rank, label in _RANK_LABELS.items()}
_RANK_PARSE["T"] = Rank.TEN


@dataclass(frozen=True)
class Card:
    """A playing card."""
    suit: Suit
    rank: Rank

    @property
    def color(self) -> Color:
        return self.suit.color

    @property
    def label(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"

    @classmethod
    def parse(cls, text: str) -> Card:
        """
        Build a card from short text such as "7S", "TH", "10D" or "ac".

        Raises ValueError on anything else.
        """
        text = text.strip().upper()
        if len(text) < 2:
            raise ValueError(f"Not a card: {text!r}")
        rank = _RANK_PARSE.get(text[:-1])
        if rank is None:
            raise ValueError(f"Unknown rank in {text!r}")
        try:
            suit = Suit(text[-1])
        except ValueError:
            raise ValueError(f"Unknown suit in {text!r}") from None
        return cls(suit=suit, rank=rank)

    def __str__(self) -> str:
        return self.label.strip()


def full_deck() -> Iterator[Card]:
    """Yield the 52 cards, suit-major (Hearts first), Ace..King within a suit."""
    for suit in _SUIT_ORDER:
        for rank in Rank:
            yield Card(suit=suit, rank=rank)


SUITS = tuple(_SUIT_ORDER)
