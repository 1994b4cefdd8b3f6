"""
Pydantic Schemas - Read-only snapshots of an engine for renderers.

A renderer never touches the Engine or its Board directly. It receives
an EngineSnapshot, a frozen copy taken between intents, so a redraw can
never observe a half-applied move.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..engine_core import Board, Card, Engine, Slot, SUITS


class CardColor(str, Enum):
    """Card colors as rendered."""
    RED = "red"
    BLACK = "black"


class CardInfo(BaseModel):
    """A card for display."""
    model_config = ConfigDict(frozen=True)

    suit: str = Field(description="H, D, C or S")
    rank: int = Field(ge=1, le=13)
    label: str
    color: CardColor

    @classmethod
    def from_card(cls, card: Card) -> CardInfo:
        return cls(
            suit=card.suit.value,
            rank=int(card.rank),
            label=card.label,
            color=CardColor(card.color.value),
        )


class SlotInfo(BaseModel):
    """A slot reference for display."""
    model_config = ConfigDict(frozen=True)

    kind: str = Field(description="cell, cascade or foundation")
    index: int

    @classmethod
    def from_slot(cls, slot: Slot) -> SlotInfo:
        return cls(kind=slot.kind.value, index=slot.index)


class CursorInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int


class BoardSnapshot(BaseModel):
    """The table: cascades bottom-first, cells, and the top card of each foundation."""
    model_config = ConfigDict(frozen=True)

    cascades: list[list[CardInfo]]
    cells: list[Optional[CardInfo]]
    foundations: list[Optional[CardInfo]] = Field(description="One per suit: H, D, C, S")

    @classmethod
    def from_board(cls, board: Board) -> BoardSnapshot:
        foundations = []
        for suit in SUITS:
            rank = board.foundation_rank(suit)
            foundations.append(CardInfo.from_card(Card(suit, rank)) if rank is not None else None)
        return cls(
            cascades=[[CardInfo.from_card(c) for c in pile] for pile in board.cascades],
            cells=[CardInfo.from_card(c) if c is not None else None for c in board.cells],
            foundations=foundations,
        )


class EngineSnapshot(BaseModel):
    """Everything a renderer needs for one frame."""
    model_config = ConfigDict(frozen=True)

    board: BoardSnapshot
    selection: Optional[SlotInfo] = None
    cursor: CursorInfo
    won: bool = False
    seed: Optional[int] = None
    moves_made: int = 0
    can_undo: bool = False

    @classmethod
    def from_engine(cls, engine: Engine) -> EngineSnapshot:
        selection = engine.selection
        return cls(
            board=BoardSnapshot.from_board(engine.board),
            selection=SlotInfo.from_slot(selection) if selection is not None else None,
            cursor=CursorInfo(row=engine.cursor.row, col=engine.cursor.col),
            won=engine.won,
            seed=engine.seed,
            moves_made=engine.moves_made,
            can_undo=engine.can_undo,
        )

    def is_selected(self, kind: str, index: int) -> bool:
        return self.selection is not None and self.selection.kind == kind and self.selection.index == index
