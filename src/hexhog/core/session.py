"""
Edit session tying together buffer, cursor, history and clipboard.
"""

import logging
from typing import Optional, Tuple

from .buffer import ByteBuffer
from .change import Change, Delete, Edit, Insert
from .cursor import Cursor
from .fileio import load_file, save_file
from .history import ChangeLog
from .nibble import NibbleInput

logger = logging.getLogger(__name__)


class EditSession:
    """Owner of the buffer, cursor, selection and history for one open file.

    All mutations go through the buffer primitives. User edits are
    wrapped in changes and recorded in ``history``, with one exception:
    overwriting the append slot writes the byte directly and is not
    undoable unless ``track_appends`` is set, in which case it is
    recorded as an insert.
    """

    def __init__(self, buffer: Optional[ByteBuffer] = None, filename: Optional[str] = None,
                 track_appends: bool = False, history_limit: Optional[int] = None) -> None:
        self.buffer = buffer if buffer is not None else ByteBuffer()
        self.filename = filename
        self.track_appends = track_appends
        self.cursor = Cursor(self.buffer)
        self.history = ChangeLog(history_limit)
        self.clipboard = b''
        self.nibbles = NibbleInput()
        self.editing = False
        self.inserting = False
        self.modified = False

    @classmethod
    def load(cls, filename: str, **kwargs) -> 'EditSession':
        """Open ``filename``; a missing file gives an empty session."""

        return cls(load_file(filename), filename=filename, **kwargs)

    def save(self, filename: Optional[str] = None) -> str:
        """
        Write the buffer to ``filename`` or the session's own file.

        The in-memory state is left untouched if writing fails, so the
        caller can retry or pick another destination.

        Returns:
            str: The path that was written

        Raises:
            SaveError: If the file could not be written
            ValueError: If no filename is known
        """

        target = filename or self.filename
        if not target:
            raise ValueError("No filename specified")

        save_file(target, self.buffer)

        self.filename = target
        self.modified = False
        return target

    # History

    def apply(self, change: Change) -> None:
        """Perform a change and record it in history."""

        self.history.apply(self.buffer, change)
        self.modified = True
        self.cursor.clamp()

    def undo(self) -> bool:
        """Undo the last change. Returns False if there was nothing to undo."""

        change = self.history.undo(self.buffer)
        if change is None:
            return False

        self.cursor.clear_selection()
        self.modified = True
        self.cursor.clamp()
        return True

    def redo(self) -> bool:
        """Redo the last undone change. Returns False if there was nothing to redo."""

        change = self.history.redo(self.buffer)
        if change is None:
            return False

        self.cursor.clear_selection()
        self.modified = True
        self.cursor.clamp()
        return True

    # Selection and clipboard

    def selection_range(self) -> Tuple[int, int]:
        return self.cursor.selection_range()

    def selection_bytes(self) -> bytes:
        """Copy of the selected bytes, inclusive on both ends."""

        lo, hi = self.cursor.selection_range()
        return self.buffer[lo:hi + 1]

    def get_clipboard(self) -> bytes:
        return self.clipboard

    def set_clipboard(self, data: bytes) -> None:
        self.clipboard = bytes(data)

    def yank(self) -> bytes:
        """Copy the selection to the clipboard and end the selection."""

        self.clipboard = self.selection_bytes()
        self.cursor.clear_selection()
        return self.clipboard

    def paste(self) -> bool:
        """
        Insert the clipboard at the cursor.

        The pasted bytes become the active selection, with the cursor on
        the last of them.

        Returns:
            bool: False if the clipboard was empty
        """

        if not self.clipboard:
            return False

        start = self.cursor.idx
        self.apply(Insert(start, self.clipboard))

        self.cursor.anchor = start
        self.cursor.set_idx(start + len(self.clipboard) - 1)
        return True

    def delete_selection(self) -> bool:
        """
        Delete the selected bytes, or the byte under the cursor.

        On the append slot with no byte to delete the cursor just moves
        left.

        Returns:
            bool: True if bytes were deleted
        """

        idx = self.cursor.idx
        lo, hi = self.cursor.selection_range()

        if lo == hi and hi >= len(self.buffer):
            self.cursor.clear_selection()
            self.cursor.move_left()
            return False

        self.apply(Delete(lo, self.buffer[lo:hi + 1]))

        self.cursor.clear_selection()
        self.cursor.set_idx(min(idx, max(0, len(self.buffer) - 1)))
        return True

    # Byte editing

    def overwrite_byte(self, value: int) -> None:
        """
        Overwrite the byte under the cursor.

        On the append slot the byte is appended; that write only enters
        history when ``track_appends`` is set.
        """

        idx = self.cursor.idx
        if idx < len(self.buffer):
            self.apply(Edit(idx, bytes([self.buffer[idx]]), bytes([value])))
            return

        if self.track_appends:
            self.apply(Insert(idx, bytes([value])))
            return

        self.buffer.replace(idx, bytes([value]))
        self.modified = True
        logger.debug("Appended untracked byte %02X at %d", value, idx)

    def insert_byte(self, value: int) -> None:
        """Insert one byte at the cursor."""

        self.apply(Insert(self.cursor.idx, bytes([value])))

    def begin_edit(self, inserting: bool = False) -> None:
        """Start entering a byte as two hex digits."""

        self.cursor.clear_selection()
        self.nibbles.reset()
        self.editing = True
        self.inserting = inserting

    def feed_nibble(self, digit: str) -> Optional[int]:
        """
        Feed one hex digit of the byte being entered.

        Once both digits are in, the byte is written (overwrite or insert,
        depending on how the edit began), the cursor moves right and the
        edit ends.

        Returns:
            The completed byte value, or None while a digit is pending
        """

        if not self.editing:
            self.begin_edit()

        value = self.nibbles.feed(digit)
        if value is None:
            return None

        if self.inserting:
            self.insert_byte(value)
        else:
            self.overwrite_byte(value)

        self.cancel_edit()
        self.cursor.move_right()
        return value

    def cancel_edit(self) -> None:
        """Leave byte entry, discarding any pending digit."""

        self.nibbles.reset()
        self.editing = False
        self.inserting = False
