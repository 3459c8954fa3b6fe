"""
UI package for the curses hex editor interface.

This package implements the terminal front end: the WindowManager that draws
the byte grid, status line and help popup, and the InputHandler that turns
key presses into edit session operations.
"""

from .window import WindowManager
from .input_handler import InputHandler, Mode

__all__ = ['WindowManager', 'InputHandler', 'Mode']
