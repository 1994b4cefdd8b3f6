"""
Deal - Seeds and the initial layout.

A seed is a 7-digit decimal number without a leading zero. The same
seed always produces the same deal: the ordered deck is shuffled with
random.Random(seed) and dealt round-robin into the cascades, giving
piles of 7, 7, 7, 7, 6, 6, 6, 6.
"""

from __future__ import annotations
import random

from .board import Board, NUM_CASCADES
from .cards import Card, full_deck

SEED_MIN = 1_000_000
SEED_MAX = 9_999_999


class SeedError(ValueError):
    """Raised for a seed that is not a 7-digit number without a leading zero."""


def parse_seed(text: str) -> int:
    """Validate and convert a seed given as text."""
    if len(text) != 7 or not text.isascii() or not text.isdigit() or text[0] == "0":
        raise SeedError(f"Invalid value: {text}")
    return int(text)


def random_seed() -> int:
    """Draw a fresh seed from the operating system's entropy source."""
    return random.SystemRandom().randint(SEED_MIN, SEED_MAX)


def shuffled_deck(seed: int) -> list[Card]:
    deck = list(full_deck())
    random.Random(seed).shuffle(deck)
    return deck


def deal(seed: int) -> Board:
    """Deal a new game for `seed`."""
    if not 0 <= seed < 2 ** 64:
        raise SeedError(f"Seed must fit in 64 bits: {seed}")
    board = Board.empty()
    for i, card in enumerate(shuffled_deck(seed)):
        board.cascades[i % NUM_CASCADES].append(card)
    return board
