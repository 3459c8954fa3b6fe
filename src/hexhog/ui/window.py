"""
Window management module for the hex editor UI.
"""

import curses
import os
import time
from typing import Dict, Final, Optional, TYPE_CHECKING

from ..config import Config
from ..core.buffer import ROW_WIDTH
from ..core.session import EditSession
from ..utils.hex_utils import byte_type, format_offset

if TYPE_CHECKING:
    from .input_handler import InputHandler

SCROLL_MARGIN: Final[int] = 5
ADDRESS_WIDTH: Final[int] = 8
HEX_WIDTH: Final[int] = ROW_WIDTH * 3 + 1
TEXT_WIDTH: Final[int] = ROW_WIDTH
GRID_WIDTH: Final[int] = ADDRESS_WIDTH + 3 + HEX_WIDTH + 3 + TEXT_WIDTH

HELP_LINES: Final[tuple] = (
    "h - help",
    "q - quit",
    "v - select",
    "y - yank",
    "p - paste",
    "i - insert",
    "u - undo",
    "U - redo",
    "s - save",
)

PAIR_IDS: Final[Dict[str, int]] = {
    'null': 1,
    'ascii_printable': 2,
    'ascii_whitespace': 3,
    'ascii_other': 4,
    'non_ascii': 5,
    'accent': 6,
    'primary': 7,
    'border': 8,
    'select': 9,
    'error': 10,
}


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width or y < 0 or x < 0:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class WindowManager:
    """Draws the session onto the terminal."""

    STATUS_MESSAGE_DURATION = 3

    def __init__(self, stdscr: 'curses.window', session: EditSession, config: Config) -> None:
        self.stdscr = stdscr
        self.session = session
        self.config = config
        self.height, self.width = stdscr.getmaxyx()
        self.top_line = 0
        self.input_handler: Optional['InputHandler'] = None
        self.status_message: Optional[str] = None
        self.status_message_time = 0.0

        self.init_colors()

    def _color(self, number: int) -> int:
        """Fit a configured colour number to what the terminal supports."""

        if number < 0:
            return -1

        if number < curses.COLORS:
            return number

        return number % 8

    def init_colors(self) -> None:
        """Initialize color pairs from the configured theme."""

        curses.start_color()
        curses.use_default_colors()

        scheme = self.config.colorscheme
        background = self._color(scheme.background)

        for name, pair_id in PAIR_IDS.items():
            if name == 'select':
                curses.init_pair(pair_id, self._color(scheme.primary), self._color(scheme.select))
            elif name == 'error':
                curses.init_pair(pair_id, curses.COLOR_RED, background)
            else:
                curses.init_pair(pair_id, self._color(getattr(scheme, name)), background)

        self.stdscr.bkgd(' ', curses.color_pair(PAIR_IDS['primary']))

    def visible_rows(self) -> int:
        """Number of grid rows that fit between the title and status lines."""

        return max(1, self.height - 2)

    def scroll_to_cursor(self) -> None:
        """Keep a margin of rows between the cursor and the edges of the view."""

        rows = self.visible_rows()
        cursor_row = self.session.cursor.row
        margin = min(SCROLL_MARGIN, (rows - 1) // 2)

        if cursor_row < self.top_line + margin:
            self.top_line = max(0, cursor_row - margin)

        if cursor_row > self.top_line + rows - 1 - margin:
            self.top_line = max(0, cursor_row - (rows - 1 - margin))

    def refresh_all(self) -> None:
        """Redraw the whole screen."""

        self.stdscr.erase()
        self.scroll_to_cursor()

        self.draw_title()
        self.draw_grid()
        self.draw_status()

        if self.input_handler and self.input_handler.showing_help:
            self.draw_help()

        self.stdscr.noutrefresh()
        curses.doupdate()

    def _left_margin(self) -> int:
        return max(0, (self.width - GRID_WIDTH) // 2)

    def draw_title(self) -> None:
        name = os.path.basename(self.session.filename) if self.session.filename else '[No Name]'
        title = f" hexhog - {name} "
        x = max(0, (self.width - len(title)) // 2)
        safe_addstr(self.stdscr, 0, x, title, curses.color_pair(PAIR_IDS['accent']))

    def _byte_attr(self, offset: int, value: int) -> int:
        cursor = self.session.cursor

        if offset == cursor.idx:
            return curses.color_pair(self._pair_for(value)) | curses.A_REVERSE

        if cursor.is_selected(offset):
            return curses.color_pair(PAIR_IDS['select'])

        return curses.color_pair(self._pair_for(value))

    def _pair_for(self, value: int) -> int:
        return PAIR_IDS[byte_type(value).value]

    def draw_grid(self) -> None:
        """Draw the address, hex and text columns."""

        session = self.session
        buffer = session.buffer
        cursor = session.cursor
        charset = self.config.charset

        left = self._left_margin()
        hex_x = left + ADDRESS_WIDTH + 3
        text_x = hex_x + HEX_WIDTH + 3
        border_attr = curses.color_pair(PAIR_IDS['border'])

        for i in range(self.visible_rows()):
            line_num = self.top_line + i
            row_start = line_num * ROW_WIDTH
            if row_start > len(buffer) or (row_start == len(buffer) and cursor.row != line_num):
                break

            y = i + 1
            addr_attr = curses.color_pair(PAIR_IDS['primary'])
            if line_num == cursor.row:
                addr_attr |= curses.A_BOLD

            safe_addstr(self.stdscr, y, left, format_offset(row_start), addr_attr)
            safe_addstr(self.stdscr, y, hex_x - 2, "│", border_attr)
            safe_addstr(self.stdscr, y, text_x - 2, "│", border_attr)

            for j, value in enumerate(buffer.get_line(line_num)):
                offset = row_start + j
                x = hex_x + j * 3 + (1 if j >= 8 else 0)
                attr = self._byte_attr(offset, value)

                if offset == cursor.idx and session.editing:
                    safe_addstr(self.stdscr, y, x, session.nibbles.display(), curses.A_REVERSE | curses.A_BOLD)
                else:
                    safe_addstr(self.stdscr, y, x, f"{value:02X}", attr)

                safe_addstr(self.stdscr, y, text_x + j, charset.get_char(value), attr)

            if cursor.row == line_num and cursor.idx == len(buffer):
                x = hex_x + cursor.col * 3 + (1 if cursor.col >= 8 else 0)
                cell = session.nibbles.display() if session.editing else "  "
                safe_addstr(self.stdscr, y, x, cell, curses.A_REVERSE)

    def draw_status(self) -> None:
        """Draw the status bar."""

        y = self.height - 1
        session = self.session

        if self.status_message:
            if self.status_message_time == 0:
                self.status_message_time = time.time()
            elif time.time() - self.status_message_time > self.STATUS_MESSAGE_DURATION:
                self.status_message = None
                self.status_message_time = 0
            else:
                attr = curses.color_pair(PAIR_IDS['accent']) | curses.A_REVERSE
                if self.status_message.startswith("Error:"):
                    attr = curses.color_pair(PAIR_IDS['error']) | curses.A_BOLD | curses.A_REVERSE
                safe_addstr(self.stdscr, y, 0, f" {self.status_message} ".ljust(self.width - 1), attr)
                return

        status = f" h - help │ cursor: {format_offset(session.cursor.idx)} │ size: {len(session.buffer)} bytes "

        if session.editing:
            status += "│ [Insert] " if session.inserting else "│ [Edit] "
        elif session.cursor.selecting:
            lo, hi = session.selection_range()
            status += f"│ [Select {hi - lo + 1}] "

        if session.modified:
            status += "│ [Modified] "

        x = max(0, (self.width - len(status)) // 2)
        safe_addstr(self.stdscr, y, x, status, curses.color_pair(PAIR_IDS['accent']) | curses.A_REVERSE)

    def draw_help(self) -> None:
        """Draw the help popup over the grid."""

        box_height = len(HELP_LINES) + 4
        box_width = 18
        y0 = max(1, (self.height - box_height) // 2)
        x0 = max(0, (self.width - box_width) // 2)

        try:
            popup = self.stdscr.derwin(box_height, box_width, y0, x0)
        except curses.error:
            return

        popup.erase()
        popup.attron(curses.color_pair(PAIR_IDS['border']))
        popup.box()
        popup.attroff(curses.color_pair(PAIR_IDS['border']))

        for i, line in enumerate(HELP_LINES):
            safe_addstr(popup, i + 2, 3, line, curses.color_pair(PAIR_IDS['primary']))

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()

        if self.width < GRID_WIDTH:
            self.status_message = "Error: Terminal too small"
