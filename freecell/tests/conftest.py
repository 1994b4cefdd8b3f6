"""
Pytest fixtures for Freecell tests.
"""

import pytest

from ..engine_core.board import Board
from ..engine_core.cards import Card
from ..engine_core.engine import Engine

SEED = 1234567


def cards(text: str) -> list[Card]:
    """Cards from space-separated short text, bottom first: cards("KS QH JC")."""
    return [Card.parse(t) for t in text.split()]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep FREECELL_* variables from the calling shell out of tests."""
    for name in ("FREECELL_HISTORY_SIZE", "FREECELL_LOG_LEVEL", "FREECELL_LOG_FORMAT", "FREECELL_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def seeded_engine() -> Engine:
    """A freshly dealt game for a fixed seed."""
    return Engine.from_seed(SEED)


@pytest.fixture
def run_board() -> Board:
    """
    Board for supermove tests.

    Cascade 0 holds a 6-card run (10H down to 5S), cascade 1 holds a
    black 9, cascade 2 is empty, one free cell is empty.
    Capacity onto a non-empty cascade is 2^1 * (1 + 1) = 4.
    """
    return Board.from_cascades(
        [
            cards("10H 9S 8H 7S 6H 5S"),
            cards("9C"),
            [],
            cards("2D"),
            cards("2C"),
            cards("3D"),
            cards("3C"),
            cards("4D"),
        ],
        cells=cards("KC KD KS"),
    )
