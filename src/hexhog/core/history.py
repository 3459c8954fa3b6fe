"""
Undo/redo log of buffer changes.
"""

import logging
from collections import deque
from typing import Deque, Optional

from .buffer import ByteBuffer
from .change import Change

logger = logging.getLogger(__name__)


class ChangeLog:
    """Two stacks of changes: applied (``undone``) and undone (``redone``).

    With ``limit`` set, the oldest applied change is evicted once the
    stack is full, which caps the undo depth.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("History limit must be a positive number")

        self.limit = limit
        self.undone: Deque[Change] = deque(maxlen=limit)
        self.redone: Deque[Change] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self.undone)

    def can_undo(self) -> bool:
        return bool(self.undone)

    def can_redo(self) -> bool:
        return bool(self.redone)

    def apply(self, buffer: ByteBuffer, change: Change) -> None:
        """Perform a new change and record it. Clears the redo stack."""

        change.apply(buffer)
        self.undone.append(change)
        self.redone.clear()
        logger.debug("Applied %r", change)

    def undo(self, buffer: ByteBuffer) -> Optional[Change]:
        """Revert the most recent change. Returns it, or None if history is empty."""

        if not self.undone:
            return None

        change = self.undone.pop()
        change.inverse().apply(buffer)
        self.redone.append(change)
        logger.debug("Undid %r", change)

        return change

    def redo(self, buffer: ByteBuffer) -> Optional[Change]:
        """Re-apply the most recently undone change. Returns it, or None."""

        if not self.redone:
            return None

        change = self.redone.pop()
        change.apply(buffer)
        self.undone.append(change)
        logger.debug("Redid %r", change)

        return change

    def clear(self) -> None:
        self.undone.clear()
        self.redone.clear()
