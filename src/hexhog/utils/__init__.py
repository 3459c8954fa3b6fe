"""
Utility package for formatting, hexdump output and logging.
"""

from .hex_utils import (
    ByteType,
    byte_type,
    is_hex_char,
    format_offset,
    format_hex_row,
)
from .dump import render_dump
from .log import setup_logging

__all__ = [
    'ByteType',
    'byte_type',
    'is_hex_char',
    'format_offset',
    'format_hex_row',
    'render_dump',
    'setup_logging',
]
