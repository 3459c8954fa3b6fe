"""
Hexdump rendering of a buffer, highlighted with Pygments.
"""

from typing import Iterable, Iterator

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import HexdumpLexer

from ..core.buffer import ROW_WIDTH
from .hex_utils import format_hex_row, format_offset


def _printable(value: int) -> str:
    return chr(value) if 0x20 <= value <= 0x7E else '.'


def iter_dump_lines(data: bytes) -> Iterator[str]:
    """Yield ``hexdump -C`` style lines for ``data``."""

    for start in range(0, len(data), ROW_WIDTH):
        row = data[start:start + ROW_WIDTH]
        hex_part = format_hex_row(row).ljust(ROW_WIDTH * 3)
        text = ''.join(_printable(b) for b in row)
        yield f"{format_offset(start)}  {hex_part}  |{text}|"

    yield format_offset(len(data))


def render_dump(data: Iterable[int], color: bool = False) -> str:
    """
    Render bytes as a hexdump.

    Args:
        data: Bytes to render
        color: Highlight the dump with ANSI colours

    Returns:
        str: The dump, one line per row, newline terminated
    """

    text = '\n'.join(iter_dump_lines(bytes(data))) + '\n'

    if not color:
        return text

    return highlight(text, HexdumpLexer(), TerminalFormatter())
