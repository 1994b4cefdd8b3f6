"""
API Module - Renderer-facing view of the engine.

Front ends read the game through these snapshots only.
"""

from .schemas import (
    BoardSnapshot,
    CardColor,
    CardInfo,
    CursorInfo,
    EngineSnapshot,
    SlotInfo,
)

__all__ = [
    "BoardSnapshot",
    "CardColor",
    "CardInfo",
    "CursorInfo",
    "EngineSnapshot",
    "SlotInfo",
]
