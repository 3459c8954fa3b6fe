"""
Reversible descriptions of buffer mutations.
"""

from dataclasses import dataclass
from typing import Union

from .buffer import ByteBuffer


@dataclass(frozen=True)
class Edit:
    """In-place overwrite of ``len(new_data)`` bytes at ``offset``."""

    offset: int
    old_data: bytes
    new_data: bytes

    def __post_init__(self) -> None:
        if len(self.old_data) != len(self.new_data):
            raise ValueError("Edit must replace bytes with the same number of bytes")

    def apply(self, buffer: ByteBuffer) -> None:
        buffer.replace(self.offset, self.new_data)

    def inverse(self) -> 'Edit':
        return Edit(self.offset, self.new_data, self.old_data)


@dataclass(frozen=True)
class Insert:
    """Bytes inserted at ``offset``."""

    offset: int
    data: bytes

    def apply(self, buffer: ByteBuffer) -> None:
        buffer.insert(self.offset, self.data)

    def inverse(self) -> 'Delete':
        return Delete(self.offset, self.data)


@dataclass(frozen=True)
class Delete:
    """Bytes removed at ``offset``; ``data`` is what was removed."""

    offset: int
    data: bytes

    def apply(self, buffer: ByteBuffer) -> None:
        buffer.delete(self.offset, len(self.data))

    def inverse(self) -> Insert:
        return Insert(self.offset, self.data)


Change = Union[Edit, Insert, Delete]
