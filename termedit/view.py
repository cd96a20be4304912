"""Projection of a TextBuffer onto the rows of the screen."""

from typing import Optional

from .constants import EditorConstants
from .model import TextBuffer


def clip_line(line: str, col_offset: int, width: int) -> str:
    """Return the part of a line visible through a horizontal window.

    A line that ends before the window starts is shown as empty.
    """
    if len(line) < col_offset:
        return ""
    return line[col_offset:col_offset + width]


def visible_rows(buffer: TextBuffer) -> list[str]:
    """Render the text rows of the viewport.

    Always returns exactly `viewport.text_rows` strings. Rows past the end of
    the document are drawn with the filler glyph.
    """
    vp = buffer.viewport
    lines = buffer.lines
    rows: list[str] = []
    for i in range(vp.row_offset, vp.row_offset + vp.text_rows):
        if i < len(lines):
            rows.append(clip_line(lines[i], vp.col_offset, vp.text_columns))
        else:
            rows.append(EditorConstants.FILLER_GLYPH)
    return rows


def screen_cursor(buffer: TextBuffer) -> tuple[int, int]:
    """Screen (y, x) of the cursor relative to the top-left text cell."""
    vp = buffer.viewport
    cursor = buffer.cursor
    return (cursor.row - vp.row_offset, cursor.column - vp.col_offset)


def status_text(buffer: TextBuffer, filename: Optional[str] = None, width: Optional[int] = None,
                modified: bool = False) -> str:
    """Compose the status line: name and size on the left, position on the right."""
    vp = buffer.viewport
    width = vp.text_columns if width is None else width
    cursor = buffer.cursor
    left = f" {filename or EditorConstants.NO_NAME}{' [+]' if modified else ''} - {buffer.line_count} lines"
    right = f"{cursor.row + 1}:{cursor.column + 1} "
    padding = width - len(left) - len(right)
    if padding < 1:
        return (left + " " + right)[:width]
    return left + " " * padding + right
