"""Constants and configuration for the termedit editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Screen layout
    STATUS_ROWS = 1  # Bottom row reserved for the status line
    DEFAULT_WIDTH = 80  # Viewport size before the terminal is measured
    DEFAULT_HEIGHT = 24
    FILLER_GLYPH = "~"  # Painted on rows past the end of the document
    NO_NAME = "[No Name]"  # Status line label for an unnamed document

    # Editing
    TAB_WIDTH = 4  # Spaces inserted for the Tab key
    NEWLINE = "\n"

    # Keys
    QUIT_KEY = "q"  # Used with Ctrl

    # File operations
    FILE_ENCODING = "utf-8"

    # CLI
    USAGE = "usage: termedit [FILE]"
    EXIT_OK = 0
    EXIT_FAILURE = 1
    EXIT_USAGE = 2
