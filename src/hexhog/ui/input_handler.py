"""
Input handler module for processing keyboard events.
"""

import curses
import logging
from enum import Enum
from typing import Callable, Dict, Final

from ..core.errors import SaveError
from ..utils.hex_utils import is_hex_char
from .window import WindowManager

logger = logging.getLogger(__name__)

ESCAPE: Final[int] = 27
BACKSPACE_KEYS: Final[tuple] = (curses.KEY_BACKSPACE, curses.KEY_DC, 127, 8)

UNSAVED_CHANGES_STATUS_MESSAGE: Final[str] = "Buffer has unsaved changes. Press s to save or q again to discard changes."


class Mode(Enum):
    MOVE = 'move'
    EDIT = 'edit'
    HELP = 'help'


class InputHandler:
    """Translates key presses into edit session operations."""

    def __init__(self, window_manager: WindowManager) -> None:
        self.window_manager = window_manager
        self.window_manager.input_handler = self
        self.mode = Mode.MOVE
        self._quit_warning_shown = False
        self.command_handlers: Dict[int, Callable[[], None]] = self._setup_handlers()

    @property
    def session(self):
        return self.window_manager.session

    @property
    def showing_help(self) -> bool:
        return self.mode is Mode.HELP

    def _setup_handlers(self) -> Dict[int, Callable[[], None]]:
        """Set up the keyboard command handlers for move mode."""

        handlers = {
            curses.KEY_LEFT: self._move_left,
            curses.KEY_RIGHT: self._move_right,
            curses.KEY_UP: self._move_up,
            curses.KEY_DOWN: self._move_down,
            curses.KEY_PPAGE: self._page_up,
            curses.KEY_NPAGE: self._page_down,

            ord('v'): self._toggle_selection,
            ESCAPE: self._clear_selection,
            ord('y'): self._yank,
            ord('p'): self._paste,
            ord('i'): self._start_insert,
            ord('u'): self._undo,
            ord('U'): self._redo,
            ord('s'): self._save,
            ord('S'): self._save,
            ord('h'): self._show_help,
            ord('H'): self._show_help,
        }

        for key in BACKSPACE_KEYS:
            handlers[key] = self._delete

        return handlers

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        if self.mode is Mode.HELP:
            self.mode = Mode.MOVE
            return True

        if self.mode is Mode.EDIT:
            self._handle_edit_input(ch)
            return True

        if ch == ord('q'):
            return self._quit()

        self._quit_warning_shown = False

        if is_hex_char(ch):
            self.session.begin_edit(inserting=False)
            self.mode = Mode.EDIT
            self._handle_edit_input(ch)
            return True

        if ch in self.command_handlers:
            self.command_handlers[ch]()

        return True

    def _handle_edit_input(self, ch: int) -> None:
        """Handle a key while a byte is being entered."""

        if ch == ESCAPE or ch in BACKSPACE_KEYS:
            self.session.cancel_edit()
            self.mode = Mode.MOVE
            return

        if not is_hex_char(ch):
            return

        if self.session.feed_nibble(chr(ch)) is not None:
            self.mode = Mode.MOVE

    def _move_left(self) -> None:
        self.session.cursor.move_left()

    def _move_right(self) -> None:
        self.session.cursor.move_right()

    def _move_up(self) -> None:
        self.session.cursor.move_up()

    def _move_down(self) -> None:
        self.session.cursor.move_down()

    def _page_up(self) -> None:
        """Move cursor up one page."""

        self.session.cursor.page_up(self.window_manager.visible_rows())

    def _page_down(self) -> None:
        """Move cursor down one page."""

        self.session.cursor.page_down(self.window_manager.visible_rows())

    def _toggle_selection(self) -> None:
        self.session.cursor.toggle_selection()

    def _clear_selection(self) -> None:
        self.session.cursor.clear_selection()

    def _yank(self) -> None:
        """Copy the selection to the clipboard."""

        data = self.session.yank()
        self.window_manager.status_message = f"Yanked {len(data)} bytes"

    def _paste(self) -> None:
        if not self.session.paste():
            self.window_manager.status_message = "Clipboard is empty"

    def _delete(self) -> None:
        self.session.delete_selection()

    def _start_insert(self) -> None:
        self.session.begin_edit(inserting=True)
        self.mode = Mode.EDIT

    def _undo(self) -> None:
        """Undo last change."""

        if not self.session.undo():
            self.window_manager.status_message = "Nothing to undo"

    def _redo(self) -> None:
        """Redo last undone change."""

        if not self.session.redo():
            self.window_manager.status_message = "Nothing to redo"

    def _show_help(self) -> None:
        self.session.cursor.clear_selection()
        self.mode = Mode.HELP

    def _save(self) -> None:
        """Save the buffer to its file."""

        try:
            path = self.session.save()
        except (SaveError, ValueError) as e:
            self.window_manager.status_message = f"Error: {e}"
            return

        self.window_manager.status_message = f"Saved: {path}"

    def _quit(self) -> bool:
        """Quit the editor, warning once about unsaved changes."""

        if self.session.modified and not self._quit_warning_shown:
            self._quit_warning_shown = True
            self.window_manager.status_message = UNSAVED_CHANGES_STATUS_MESSAGE
            return True

        logger.info("Quitting")
        return False
