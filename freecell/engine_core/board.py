"""
Board - The mutable aggregate of 8 cascades, 4 free cells and 4 foundations.

Design principles:
- Emptiness is a property of the slot (None / empty list), never an in-band card
- Foundations store only the highest rank accepted so far
- Mutating primitives are used by the rules module after validation;
  callers work on a copy and replace the board wholesale

Invariant (checked by is_complete_deck): every reachable board holds the
52-card deck exactly once across cascades, cells and foundations.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Sequence

from .cards import Card, Rank, Suit, SUITS, full_deck


NUM_CASCADES = 8
NUM_CELLS = 4
NUM_FOUNDATIONS = 4

# 7 dealt cards topped by a King, then Queen down to Ace.
MAX_CASCADE_LENGTH = 19


class SlotKind(Enum):
    """Kinds of addressable slots."""
    CELL = "cell"
    CASCADE = "cascade"
    FOUNDATION = "foundation"


_SLOT_COUNTS = {
    SlotKind.CELL: NUM_CELLS,
    SlotKind.CASCADE: NUM_CASCADES,
    SlotKind.FOUNDATION: NUM_FOUNDATIONS,
}


@dataclass(frozen=True)
class Slot:
    """Reference to one slot on the board."""
    kind: SlotKind
    index: int

    def __post_init__(self):
        limit = _SLOT_COUNTS[self.kind]
        if not 0 <= self.index < limit:
            raise ValueError(f"{self.kind.value} index {self.index} out of range 0..{limit - 1}")

    @classmethod
    def cell(cls, index: int) -> Slot:
        return cls(SlotKind.CELL, index)

    @classmethod
    def cascade(cls, index: int) -> Slot:
        return cls(SlotKind.CASCADE, index)

    @classmethod
    def foundation(cls, suit: Suit) -> Slot:
        return cls(SlotKind.FOUNDATION, suit.index)

    @property
    def suit(self) -> Suit:
        """Suit of a foundation slot."""
        if self.kind is not SlotKind.FOUNDATION:
            raise ValueError(f"{self} is not a foundation")
        return SUITS[self.index]

    def __str__(self) -> str:
        return f"{self.kind.value}[{self.index}]"


@dataclass
class Board:
    """
    Complete table layout at a point in time.

    cascades[j][0] is the bottom (dealt first); cascades[j][-1] is the top.
    """
    cascades: list[list[Card]] = field(default_factory=lambda: [[] for _ in range(NUM_CASCADES)])
    cells: list[Card | None] = field(default_factory=lambda: [None] * NUM_CELLS)
    foundations: dict[Suit, Rank | None] = field(
        default_factory=lambda: {suit: None for suit in SUITS}
    )

    def __post_init__(self):
        if len(self.cascades) != NUM_CASCADES:
            raise ValueError(f"Expected {NUM_CASCADES} cascades, got {len(self.cascades)}")
        if len(self.cells) != NUM_CELLS:
            raise ValueError(f"Expected {NUM_CELLS} cells, got {len(self.cells)}")
        for cascade in self.cascades:
            assert len(cascade) <= MAX_CASCADE_LENGTH, "cascade overflow"
        for suit in SUITS:
            self.foundations.setdefault(suit, None)

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_cascades(
        cls,
        cascades: Sequence[Iterable[Card]],
        cells: Sequence[Card | None] | None = None,
        foundations: dict[Suit, Rank | None] | None = None,
    ) -> Board:
        """Build a board from explicit contents; missing cascades are empty."""
        piles = [list(c) for c in cascades]
        piles.extend([] for _ in range(NUM_CASCADES - len(piles)))
        free = list(cells) if cells is not None else []
        free.extend([None] * (NUM_CELLS - len(free)))
        return cls(
            cascades=piles,
            cells=free,
            foundations=dict(foundations or {}),
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def cascade(self, index: int) -> list[Card]:
        return self.cascades[index]

    def peek_top(self, slot: Slot) -> Card | None:
        """The addressable card of a cell or cascade, or None when empty."""
        if slot.kind is SlotKind.CELL:
            return self.cells[slot.index]
        if slot.kind is SlotKind.CASCADE:
            pile = self.cascades[slot.index]
            return pile[-1] if pile else None
        rank = self.foundations[slot.suit]
        return Card(slot.suit, rank) if rank is not None else None

    def is_empty(self, slot: Slot) -> bool:
        return self.peek_top(slot) is None

    def foundation_rank(self, suit: Suit) -> Rank | None:
        return self.foundations[suit]

    def empty_cells(self) -> int:
        return sum(1 for card in self.cells if card is None)

    def empty_cascades(self) -> int:
        return sum(1 for pile in self.cascades if not pile)

    # ------------------------------------------------------------------
    # Mutating primitives (only called on an approved move)
    # ------------------------------------------------------------------

    def remove_top(self, slot: Slot, count: int = 1) -> list[Card]:
        """Remove and return the top `count` cards of a cell or cascade, bottom-first."""
        if slot.kind is SlotKind.CELL:
            card = self.cells[slot.index]
            if card is None or count != 1:
                raise ValueError(f"Cannot take {count} card(s) from {slot}")
            self.cells[slot.index] = None
            return [card]
        if slot.kind is SlotKind.CASCADE:
            pile = self.cascades[slot.index]
            if not 1 <= count <= len(pile):
                raise ValueError(f"Cannot take {count} card(s) from {slot} holding {len(pile)}")
            taken = pile[-count:]
            del pile[-count:]
            return taken
        raise ValueError("Cards are never removed from a foundation")

    def append(self, slot: Slot, cards: Sequence[Card]) -> None:
        """Place cards (bottom-first) onto a cell, cascade or foundation."""
        if slot.kind is SlotKind.CELL:
            if self.cells[slot.index] is not None or len(cards) != 1:
                raise ValueError(f"Cannot place {len(cards)} card(s) in {slot}")
            self.cells[slot.index] = cards[0]
        elif slot.kind is SlotKind.CASCADE:
            pile = self.cascades[slot.index]
            assert len(pile) + len(cards) <= MAX_CASCADE_LENGTH, "cascade overflow"
            pile.extend(cards)
        else:
            for card in cards:
                self.accept(card)

    def accept(self, card: Card) -> None:
        """Record `card` as the new top of its suit's foundation."""
        self.foundations[card.suit] = card.rank

    # ------------------------------------------------------------------
    # Whole-board helpers
    # ------------------------------------------------------------------

    def copy(self) -> Board:
        return Board(
            cascades=[list(pile) for pile in self.cascades],
            cells=list(self.cells),
            foundations=dict(self.foundations),
        )

    def cards(self) -> Iterator[Card]:
        """Every card on the table, foundations expanded to Ace..top."""
        for pile in self.cascades:
            yield from pile
        for card in self.cells:
            if card is not None:
                yield card
        for suit, top in self.foundations.items():
            if top is None:
                continue
            for rank in range(Rank.ACE, top + 1):
                yield Card(suit, Rank(rank))

    def is_complete_deck(self) -> bool:
        """True iff the board holds each of the 52 cards exactly once."""
        return Counter(self.cards()) == Counter(full_deck())
