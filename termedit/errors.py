"""Exceptions raised by the termedit editor."""

from typing import Optional


class EditorError(Exception):
    """Base class for all editor failures."""


class TerminalInitError(EditorError):
    """The terminal could not be put into fullscreen/raw mode."""


class InputError(EditorError):
    """Reading the next key from the terminal failed."""


class DocumentLoadError(EditorError):
    """A file could not be read into the document."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot open {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UsageError(EditorError):
    """The command line was malformed."""
