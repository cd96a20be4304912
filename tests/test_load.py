"""Test replacing the document with loaded lines."""

import pytest
from termedit.model import TextBuffer, CursorPosition


def test_load_replaces_lines_and_resets_cursor():
    buf = TextBuffer(["old", "content"], width=3, height=3)
    buf.move_caret(1, 7)
    assert buf.viewport.col_offset > 0
    buf.load(["new"])
    assert buf.lines == ("new",)
    assert buf.cursor == CursorPosition(0, 0)
    assert buf.viewport.row_offset == 0
    assert buf.viewport.col_offset == 0


def test_load_empty_sequence_gives_one_empty_line():
    buf = TextBuffer(["abc"])
    buf.load([])
    assert buf.lines == ("",)


def test_load_accepts_generators():
    buf = TextBuffer()
    buf.load(line for line in ["a", "b"])
    assert buf.lines == ("a", "b")


@pytest.mark.parametrize("bad", [["ok", "two\nlines"], ["ok", None], [b"bytes"]])
def test_load_rejects_bad_lines_without_mutating(bad):
    buf = TextBuffer(["keep", "this"])
    buf.move_caret(1, 2)
    with pytest.raises(ValueError):
        buf.load(bad)
    assert buf.lines == ("keep", "this")
    assert buf.cursor == CursorPosition(1, 2)
