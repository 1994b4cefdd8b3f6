"""
Intents - Discrete player inputs and the result of applying one.

Intents come in two flavours:
1. Cursor-relative (MOVE_CURSOR, TOGGLE_SELECT, SEND_TO_FOUNDATION without
   a slot, UNDO), as produced by the key decoder
2. Directly addressed (SELECT, DESELECT, MOVE, SEND_TO_FOUNDATION with a
   slot), for front ends that know which slot the player means

Every intent is applied to completion by Engine.apply().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .board import Slot
from .rules import Move


class Direction(Enum):
    """Cursor directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class IntentType(Enum):
    """Types of intents the engine understands."""
    MOVE_CURSOR = "move_cursor"
    TOGGLE_SELECT = "toggle_select"
    SELECT = "select"
    DESELECT = "deselect"
    MOVE = "move"
    SEND_TO_FOUNDATION = "send_to_foundation"
    UNDO = "undo"


@dataclass(frozen=True)
class Intent:
    """A single player input."""
    intent_type: IntentType
    direction: Direction | None = None
    source: Slot | None = None
    destination: Slot | None = None

    @classmethod
    def move_cursor(cls, direction: Direction) -> Intent:
        return cls(IntentType.MOVE_CURSOR, direction=direction)

    @classmethod
    def toggle_select(cls) -> Intent:
        return cls(IntentType.TOGGLE_SELECT)

    @classmethod
    def select(cls, slot: Slot) -> Intent:
        return cls(IntentType.SELECT, source=slot)

    @classmethod
    def deselect(cls) -> Intent:
        return cls(IntentType.DESELECT)

    @classmethod
    def move(cls, source: Slot, destination: Slot) -> Intent:
        """Factory for a move attempt between two slots."""
        return cls(IntentType.MOVE, source=source, destination=destination)

    @classmethod
    def send_to_foundation(cls, slot: Slot | None = None) -> Intent:
        """Factory for sending a card home. Without a slot, the cursor slot is used."""
        return cls(IntentType.SEND_TO_FOUNDATION, source=slot)

    @classmethod
    def undo(cls) -> Intent:
        return cls(IntentType.UNDO)


@dataclass
class IntentResult:
    """
    Outcome of applying an intent.

    `applied` is False for a no-op (an illegal move, undo with nothing
    to undo). A no-op leaves the engine exactly as it was.
    """
    applied: bool
    move: Move | None = None
    won: bool = False
    changes: list[str] = field(default_factory=list)

    @classmethod
    def noop(cls, won: bool = False) -> IntentResult:
        return cls(applied=False, won=won)

    @classmethod
    def done(cls, *changes: str, move: Move | None = None, won: bool = False) -> IntentResult:
        return cls(applied=True, move=move, won=won, changes=list(changes))
