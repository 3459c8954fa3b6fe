"""
Two-keystroke hex byte entry.
"""

from enum import Enum
from typing import Optional

HEX_DIGITS = '0123456789abcdefABCDEF'


class NibbleState(Enum):
    EMPTY = 'empty'
    ONE_DIGIT = 'one_digit'
    COMPLETE = 'complete'


class NibbleInput:
    """Collects two hex digits into one byte value.

    The state goes EMPTY -> ONE_DIGIT -> COMPLETE. Feeding a digit while
    COMPLETE starts a new byte.
    """

    def __init__(self) -> None:
        self.state = NibbleState.EMPTY
        self.high: Optional[int] = None
        self.value: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.state is NibbleState.EMPTY

    def feed(self, digit: str) -> Optional[int]:
        """
        Add one hex digit.

        Args:
            digit: A single character in ``0-9``, ``a-f`` or ``A-F``

        Returns:
            The completed byte value once both nibbles are in, else None
        """

        if len(digit) != 1 or digit not in HEX_DIGITS:
            raise ValueError(f"Not a hex digit: {digit!r}")

        nibble = int(digit, 16)

        if self.state is not NibbleState.ONE_DIGIT:
            self.state = NibbleState.ONE_DIGIT
            self.high = nibble
            self.value = None
            return None

        self.state = NibbleState.COMPLETE
        self.value = (self.high << 4) | nibble
        self.high = None

        return self.value

    def reset(self) -> None:
        """Discard any pending digits."""

        self.state = NibbleState.EMPTY
        self.high = None
        self.value = None

    def display(self) -> str:
        """Two-character rendering of the pending input, ``_`` for missing digits."""

        if self.state is NibbleState.ONE_DIGIT:
            return f"{self.high:X}_"

        if self.state is NibbleState.COMPLETE:
            return f"{self.value:02X}"

        return "__"
