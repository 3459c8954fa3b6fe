"""
Utility functions for hex formatting and byte classification.
"""

from enum import Enum
from typing import Final, Tuple

WHITESPACE_BYTES: Final[Tuple[int, ...]] = (0x09, 0x0A, 0x0C, 0x0D, 0x20)


class ByteType(Enum):
    NULL = 'null'
    ASCII_PRINTABLE = 'ascii_printable'
    ASCII_WHITESPACE = 'ascii_whitespace'
    ASCII_OTHER = 'ascii_other'
    NON_ASCII = 'non_ascii'


def byte_type(value: int) -> ByteType:
    """
    Classify a byte value for colouring and glyph selection.

    Args:
        value (int): Byte value, 0-255

    Returns:
        ByteType: The class the byte falls into
    """

    if value == 0:
        return ByteType.NULL

    if 0x21 <= value <= 0x7E:
        return ByteType.ASCII_PRINTABLE

    if value in WHITESPACE_BYTES:
        return ByteType.ASCII_WHITESPACE

    if value < 0x80:
        return ByteType.ASCII_OTHER

    return ByteType.NON_ASCII


def is_hex_char(ch: int) -> bool:
    """Check if a key code is a valid hex digit."""

    return (0x30 <= ch <= 0x39) or (0x41 <= ch <= 0x46) or (0x61 <= ch <= 0x66)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def format_hex_row(data: bytes) -> str:
    """Format up to 16 bytes as two space-separated groups of eight."""

    cells = [f"{b:02X}" for b in data]
    left = ' '.join(cells[:8])
    right = ' '.join(cells[8:16])

    if not right:
        return left

    return f"{left}  {right}"
