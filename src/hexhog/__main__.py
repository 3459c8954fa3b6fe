"""
Entry point for hexhog.
"""

import argparse
import curses
import logging
import sys
from typing import List, Optional

from .config import Config, load_config
from .core.fileio import file_exists, load_file
from .core.session import EditSession
from .ui.input_handler import InputHandler
from .ui.window import WindowManager
from .utils.dump import render_dump
from .utils.log import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="hexhog",
        description="hexhog - terminal hex editor"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to open; created on save if it does not exist"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path of the config file (default: ~/.config/hexhog/config.toml)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write a log to this file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug messages"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print a hexdump of the file and exit"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight the hexdump"
    )
    return parser.parse_args(argv)


def run_editor(stdscr: 'curses.window', session: EditSession, config: Config,
               startup_messages: List[str]) -> None:
    """Main loop of the curses editor."""

    curses.curs_set(0)
    stdscr.timeout(100)
    stdscr.keypad(True)

    window_manager = WindowManager(stdscr, session, config)
    input_handler = InputHandler(window_manager)

    if startup_messages:
        window_manager.status_message = startup_messages[0]

    while True:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        window_manager.refresh_all()

        try:
            ch = stdscr.getch()
        except KeyboardInterrupt:
            break

        if ch == -1 or ch == curses.KEY_RESIZE:
            continue

        if not input_handler.handle_input(ch):
            break


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.debug else logging.INFO)

    try:
        buffer = load_file(args.file)
    except OSError as e:
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        return 1

    if args.dump:
        color = not args.no_color and sys.stdout.isatty()
        sys.stdout.write(render_dump(buffer.to_bytes(), color=color))
        return 0

    config, errors = load_config(args.config)
    messages = [f"Error: {error}" for error in errors]
    if not messages and not file_exists(args.file):
        messages.append(f"New file: {args.file}")

    session = EditSession(
        buffer,
        filename=args.file,
        track_appends=config.editor.track_appends,
        history_limit=config.editor.history_limit,
    )

    curses.wrapper(run_editor, session, config, messages)
    return 0


if __name__ == "__main__":
    sys.exit(main())
