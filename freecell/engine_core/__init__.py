"""
Engine Core - Freecell rules and state.

The engine is the runtime that:
1. Deals a board from a seed
2. Applies player intents one at a time
3. Validates moves, including multi-card supermoves
4. Keeps a bounded undo history
5. Reports victory
"""

from .cards import Card, Color, Rank, Suit, SUITS, full_deck
from .board import Board, Slot, SlotKind, MAX_CASCADE_LENGTH, NUM_CASCADES, NUM_CELLS
from .rules import (
    Move,
    apply_move,
    can_stack,
    foundation_accepts,
    is_won,
    plan_foundation_move,
    plan_move,
    run_length,
    supermove_capacity,
)
from .move_generator import legal_moves
from .history import History
from .intent import Direction, Intent, IntentResult, IntentType
from .deal import SeedError, deal, parse_seed, random_seed
from .engine import Cursor, Engine

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "SUITS",
    "full_deck",
    "Board",
    "Slot",
    "SlotKind",
    "MAX_CASCADE_LENGTH",
    "NUM_CASCADES",
    "NUM_CELLS",
    "Move",
    "apply_move",
    "can_stack",
    "foundation_accepts",
    "is_won",
    "plan_foundation_move",
    "plan_move",
    "run_length",
    "supermove_capacity",
    "legal_moves",
    "History",
    "Direction",
    "Intent",
    "IntentResult",
    "IntentType",
    "SeedError",
    "deal",
    "parse_seed",
    "random_seed",
    "Cursor",
    "Engine",
]
