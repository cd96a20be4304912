"""termedit - A minimal screen-oriented text editor."""

from .model import TextBuffer, CursorPosition, Viewport
from .view import visible_rows, screen_cursor

__all__ = [
    'TextBuffer',
    'CursorPosition',
    'Viewport',
    'visible_rows',
    'screen_cursor',
]
