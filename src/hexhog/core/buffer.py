"""
Byte buffer holding the data being edited.
"""

from typing import Final, Iterable, Tuple

ROW_WIDTH: Final[int] = 16


class ByteBuffer:
    """Resizable sequence of bytes with span-level mutation primitives.

    ``replace``, ``insert`` and ``delete`` are the only methods that mutate
    the underlying data. Everything else is read-only.
    """

    def __init__(self, initial_data: Iterable[int] = b'') -> None:
        self._data = bytearray(initial_data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return bytes(self._data[key])

        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteBuffer):
            return self._data == other._data

        if isinstance(other, (bytes, bytearray)):
            return self._data == other

        return NotImplemented

    def __repr__(self) -> str:
        return f"ByteBuffer({bytes(self._data)!r})"

    def to_bytes(self) -> bytes:
        """Return an immutable copy of the buffer contents."""

        return bytes(self._data)

    def get_line(self, line_number: int) -> bytes:
        """Get the bytes shown on one row of the grid."""

        start = line_number * ROW_WIDTH
        end = min(start + ROW_WIDTH, len(self._data))
        return bytes(self._data[start:end])

    def get_line_count(self) -> int:
        """Get the number of rows needed to show every byte."""

        return (len(self._data) + ROW_WIDTH - 1) // ROW_WIDTH

    def get_span(self, offset: int, length: int) -> Tuple[bytes, int]:
        """
        Get a span of bytes and the number of bytes actually returned.

        Args:
            offset: Starting offset
            length: Number of bytes requested

        Returns:
            The bytes and their count, which is smaller than ``length``
            when the span runs past the end of the buffer.
        """

        end = min(offset + length, len(self._data))
        data = bytes(self._data[offset:end])
        return data, len(data)

    def replace(self, offset: int, new_bytes: bytes) -> None:
        """
        Overwrite bytes starting at ``offset``, appending any that fall past the end.

        The buffer never shrinks. Writing at ``offset == len(self)`` is how
        the append slot gets filled.
        """

        self._check_offset(offset)
        _check_values(new_bytes)

        for i, value in enumerate(new_bytes):
            pos = offset + i
            if pos < len(self._data):
                self._data[pos] = value
                continue

            self._data.append(value)

    def insert(self, offset: int, new_bytes: bytes) -> None:
        """Insert bytes at ``offset``, shifting the tail to the right."""

        self._check_offset(offset)
        _check_values(new_bytes)

        self._data[offset:offset] = bytes(new_bytes)

    def delete(self, offset: int, count: int) -> int:
        """
        Remove up to ``count`` bytes starting at ``offset``.

        Deleting past the end is not an error: the removal simply stops at
        the last byte.

        Returns:
            int: Number of bytes actually removed
        """

        if offset < 0 or count <= 0 or offset >= len(self._data):
            return 0

        end = min(offset + count, len(self._data))
        del self._data[offset:end]

        return end - offset

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self._data):
            raise ValueError(
                f"Offset {offset} outside buffer of length {len(self._data)}"
            )


def _check_values(values: Iterable[int]) -> None:
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")
