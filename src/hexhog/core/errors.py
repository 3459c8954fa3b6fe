"""
Exception types raised by the editing engine.
"""

from typing import Optional


class HexhogError(Exception):
    """Base class for all hexhog errors."""


class SaveError(HexhogError, OSError):
    """Writing the buffer back to disk failed."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        message = f"Failed to save {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigError(HexhogError, ValueError):
    """A single configuration field holds a malformed value."""
