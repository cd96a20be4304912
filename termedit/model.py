import logging
from dataclasses import dataclass
from typing import Iterable

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class CursorPosition:
    row: int = 0
    column: int = 0


@dataclass
class Viewport:
    """Visible window onto the document.

    The last screen row is reserved for the status line, so only
    `text_rows` rows show document content.
    """
    width: int = EditorConstants.DEFAULT_WIDTH
    height: int = EditorConstants.DEFAULT_HEIGHT
    row_offset: int = 0
    col_offset: int = 0

    @property
    def text_rows(self) -> int:
        return max(1, self.height - EditorConstants.STATUS_ROWS)

    @property
    def text_columns(self) -> int:
        return max(1, self.width)


class TextBuffer:
    """Lines of text, a cursor into them, and the viewport that follows it.

    The buffer never holds zero lines: an empty document is a single empty
    line. The cursor column may equal the line length (end of line).
    """

    def __init__(self, lines: Iterable[str] = ("",), width: int = EditorConstants.DEFAULT_WIDTH,
                 height: int = EditorConstants.DEFAULT_HEIGHT):
        self._lines: list[str] = [""]
        self._cursor = CursorPosition()
        self._viewport = Viewport(width=width, height=height)
        self.load(lines)

    # --- Read-only state ---

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def cursor(self) -> CursorPosition:
        """A copy of the cursor; move it with move_caret()."""
        return CursorPosition(self._cursor.row, self._cursor.column)

    @property
    def viewport(self) -> Viewport:
        """A copy of the viewport; offsets follow the cursor automatically."""
        vp = self._viewport
        return Viewport(vp.width, vp.height, vp.row_offset, vp.col_offset)

    def current_line(self) -> str:
        """Return the line under the cursor.

        Raises IndexError if the cursor row is somehow out of range instead
        of reading a different line.
        """
        row = self._cursor.row
        if not 0 <= row < len(self._lines):
            raise IndexError(f"cursor row {row} outside document of {len(self._lines)} lines")
        return self._lines[row]

    def _replace_current_line(self, text: str):
        self.current_line()
        self._lines[self._cursor.row] = text

    # --- Loading ---

    def load(self, lines: Iterable[str]):
        """Replace the whole document and reset the cursor and viewport.

        Validation happens before anything is changed, so a bad input
        leaves the buffer as it was.
        """
        new_lines = list(lines)
        for i, line in enumerate(new_lines):
            if not isinstance(line, str):
                raise ValueError(f"line {i} is {type(line).__name__}, not str")
            if EditorConstants.NEWLINE in line:
                raise ValueError(f"line {i} contains a newline")
        if not new_lines:
            new_lines = [""]

        self._lines = new_lines
        self._cursor = CursorPosition()
        self._viewport.row_offset = 0
        self._viewport.col_offset = 0
        logger.debug(f"Loaded {len(new_lines)} lines")

    # --- Editing ---

    def insert_char(self, c: str):
        """Insert one character at the cursor.

        A newline splits the line: the text after the cursor moves to a new
        line below and the cursor goes to its start.
        """
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"insert_char expects a single character, got {c!r}")

        line = self.current_line()
        column = self._cursor.column
        if c == EditorConstants.NEWLINE:
            self._replace_current_line(line[:column])
            self._lines.insert(self._cursor.row + 1, line[column:])
            self._set_cursor(self._cursor.row + 1, 0)
        else:
            self._replace_current_line(line[:column] + c + line[column:])
            self._set_cursor(self._cursor.row, column + 1)

    def backspace(self):
        """Delete the character before the cursor, joining lines at column 0."""
        row = self._cursor.row
        column = self._cursor.column
        if column == 0:
            if row == 0:
                return
            line = self.current_line()
            join_column = len(self._lines[row - 1])
            self._lines[row - 1] += line
            del self._lines[row]
            self._set_cursor(row - 1, join_column)
        else:
            line = self.current_line()
            self._replace_current_line(line[:column - 1] + line[column:])
            self._set_cursor(row, column - 1)

    def delete_forward(self):
        """Delete the character under the cursor, pulling up the next line at end of line."""
        row = self._cursor.row
        column = self._cursor.column
        line = self.current_line()
        if column >= len(line):
            if row + 1 >= len(self._lines):
                return
            self._replace_current_line(line + self._lines[row + 1])
            del self._lines[row + 1]
        else:
            self._replace_current_line(line[:column] + line[column + 1:])

    # --- Movement ---

    def move_caret(self, delta_row: int, delta_col: int):
        """Move the cursor by signed deltas, clamping to the document.

        The row is clamped first, then the column against the new row's
        length, so moving onto a shorter line snaps to its end.
        """
        self._set_cursor(self._cursor.row + delta_row, self._cursor.column + delta_col)

    def _set_cursor(self, row: int, column: int):
        row = min(max(row, 0), len(self._lines) - 1)
        column = min(max(column, 0), len(self._lines[row]))
        self._cursor.row = row
        self._cursor.column = column
        self.scroll_to_cursor()

    def resize(self, width: int, height: int):
        """Adopt new screen dimensions and keep the cursor visible."""
        self._viewport.width = width
        self._viewport.height = height
        self.scroll_to_cursor()

    def scroll_to_cursor(self):
        """Derive viewport offsets so the cursor is inside the window.

        Offsets only move as far as needed, which makes a repeated call a
        no-op.
        """
        vp = self._viewport
        row = self._cursor.row
        column = self._cursor.column

        if row < vp.row_offset:
            vp.row_offset = row
        elif row > vp.row_offset + vp.text_rows - 1:
            vp.row_offset = row - (vp.text_rows - 1)

        if column < vp.col_offset:
            vp.col_offset = column
        elif column > vp.col_offset + vp.text_columns - 1:
            vp.col_offset = column - (vp.text_columns - 1)
