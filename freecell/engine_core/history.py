"""
History - Bounded undo log of board snapshots.

The log is a ring of `capacity` snapshots. The newest entry is the
current board; undo discards it and exposes the one before. Once the
ring is full, committing drops the oldest snapshot, so at most
capacity - 1 moves can ever be undone.

Nothing ahead of the current entry is kept: undone boards are gone,
and a later commit can never bring a stale one back.
"""

from __future__ import annotations
from collections import deque
import logging

from .board import Board

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100


class History:
    """Fixed-capacity stack of Board snapshots with undo."""

    def __init__(self, initial: Board, capacity: int = DEFAULT_CAPACITY):
        if capacity < 2:
            raise ValueError(f"History capacity must be at least 2, got {capacity}")
        self._capacity = capacity
        self._snapshots: deque[Board] = deque(maxlen=capacity)
        self._snapshots.append(initial.copy())

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current(self) -> Board:
        """The board at the cursor. Treat as read-only."""
        return self._snapshots[-1]

    @property
    def depth(self) -> int:
        """How many undo steps are available."""
        return len(self._snapshots) - 1

    def can_undo(self) -> bool:
        return self.depth > 0

    def commit(self, board: Board) -> None:
        """Store a copy of `board` as the new current snapshot."""
        if len(self._snapshots) == self._capacity:
            logger.debug("History full at %d entries, dropping oldest", self._capacity)
        self._snapshots.append(board.copy())

    def undo(self) -> Board | None:
        """Step back one snapshot. Returns the restored board, or None if there is none."""
        if not self.can_undo():
            return None
        self._snapshots.pop()
        return self.current
