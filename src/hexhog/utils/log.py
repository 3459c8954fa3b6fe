"""
Logging setup for the editor.

Curses owns the terminal while the editor runs, so log records only ever
go to a file.
"""

import logging
import logging.handlers
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-20s - %(message)s"


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure the ``hexhog`` logger.

    Args:
        log_file: Path of the log file, or None to discard all records
        level: Minimum level written to the file

    Returns:
        logging.Logger: The configured package logger
    """

    root = logging.getLogger('hexhog')
    root.handlers = []
    root.propagate = False

    if not log_file:
        root.addHandler(logging.NullHandler())
        return root

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=2 * 1024 * 1024, backupCount=3, encoding='utf-8'
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)

    root.addHandler(handler)
    root.setLevel(level)

    root.info("Logging to %s at level %s", log_file, logging.getLevelName(level))
    return root
