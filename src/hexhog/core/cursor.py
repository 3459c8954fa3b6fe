"""
Cursor addressing and selection over a byte buffer.
"""

from typing import Optional, Sized, Tuple

from .buffer import ROW_WIDTH


def offset_of(row: int, col: int) -> int:
    """Linear offset of a (row, column) grid position."""

    return row * ROW_WIDTH + col


def position_of(offset: int) -> Tuple[int, int]:
    """Grid position (row, column) of a linear offset."""

    return offset // ROW_WIDTH, offset % ROW_WIDTH


class Cursor:
    """Cursor offset plus an optional selection anchor.

    The offset ranges over ``[0, len(buffer)]``; ``len(buffer)`` is the
    append slot one past the last byte. Every move saturates at both
    ends instead of failing.
    """

    def __init__(self, buffer: Sized, idx: int = 0) -> None:
        self.buffer = buffer
        self.idx = 0
        self.anchor: Optional[int] = None
        self.set_idx(idx)

    @property
    def row(self) -> int:
        return self.idx // ROW_WIDTH

    @property
    def col(self) -> int:
        return self.idx % ROW_WIDTH

    @property
    def position(self) -> Tuple[int, int]:
        return position_of(self.idx)

    @property
    def selecting(self) -> bool:
        return self.anchor is not None

    def set_idx(self, idx: int) -> None:
        """Place the cursor, clamped to ``[0, len(buffer)]``."""

        self.idx = max(0, min(idx, len(self.buffer)))

    def set_position(self, row: int, col: int) -> None:
        self.set_idx(offset_of(row, col))

    def clamp(self) -> None:
        """Re-clamp the cursor and anchor after the buffer has changed size."""

        self.set_idx(self.idx)
        if self.anchor is not None:
            self.anchor = max(0, min(self.anchor, len(self.buffer)))

    def move_left(self) -> None:
        self.set_idx(self.idx - 1)

    def move_right(self) -> None:
        self.set_idx(self.idx + 1)

    def move_up(self) -> None:
        self.set_idx(self.idx - ROW_WIDTH)

    def move_down(self) -> None:
        self.set_idx(self.idx + ROW_WIDTH)

    def page_up(self, page_size: int) -> None:
        """Move up by ``page_size`` rows."""

        self.set_idx(self.idx - max(1, page_size) * ROW_WIDTH)

    def page_down(self, page_size: int) -> None:
        """Move down by ``page_size`` rows."""

        self.set_idx(self.idx + max(1, page_size) * ROW_WIDTH)

    def start_selection(self) -> None:
        self.anchor = self.idx

    def clear_selection(self) -> None:
        self.anchor = None

    def toggle_selection(self) -> None:
        if self.selecting:
            self.clear_selection()
            return

        self.start_selection()

    def selection_range(self) -> Tuple[int, int]:
        """
        Get the inclusive range covered by the selection.

        Without an active selection the range is the cursor offset alone.
        An active range is ordered and clamped so that
        ``0 <= lo <= hi <= len(buffer) - 1``; an empty buffer yields ``(0, 0)``.

        Returns:
            Tuple[int, int]: The (lo, hi) offsets
        """

        if self.anchor is None:
            return self.idx, self.idx

        length = len(self.buffer)
        if length == 0:
            return 0, 0

        hi = min(max(self.anchor, self.idx), length - 1)
        lo = min(self.anchor, self.idx, hi)

        return lo, hi

    def is_selected(self, offset: int) -> bool:
        """Check whether ``offset`` lies inside the active selection."""

        if self.anchor is None:
            return False

        lo, hi = self.selection_range()
        return lo <= offset <= hi
