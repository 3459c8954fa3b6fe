"""
Core package for the byte editing engine.

This package implements the editing engine of the hex editor: the ByteBuffer
with its mutation primitives, cursor and selection addressing, reversible
changes with their undo/redo log, and the EditSession that ties them together.
"""

from .buffer import ByteBuffer, ROW_WIDTH
from .change import Change, Delete, Edit, Insert
from .cursor import Cursor, offset_of, position_of
from .errors import ConfigError, HexhogError, SaveError
from .fileio import load_file, save_file
from .history import ChangeLog
from .nibble import NibbleInput, NibbleState
from .session import EditSession

__all__ = [
    'ByteBuffer',
    'ROW_WIDTH',
    'Change',
    'Delete',
    'Edit',
    'Insert',
    'Cursor',
    'offset_of',
    'position_of',
    'ConfigError',
    'HexhogError',
    'SaveError',
    'load_file',
    'save_file',
    'ChangeLog',
    'NibbleInput',
    'NibbleState',
    'EditSession',
]
