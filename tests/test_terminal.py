"""Test the blessed/curtsies terminal wrapper without a real tty."""

from unittest.mock import MagicMock, patch

import pytest
from termedit.errors import TerminalInitError
from termedit.terminal import TerminalInterface


@pytest.fixture
def term():
    mock_term = MagicMock()
    mock_term.width = 10
    mock_term.height = 4
    mock_term.move.side_effect = lambda y, x: f"[{y},{x}]"
    mock_term.enter_fullscreen = "<enter>"
    mock_term.exit_fullscreen = "<exit>"
    mock_term.clear = "<clear>"
    mock_term.home = "<home>"
    mock_term.hide_cursor = ""
    mock_term.normal_cursor = ""
    mock_term.reverse = ""
    mock_term.normal = ""
    return mock_term


def test_setup_and_cleanup_enter_and_leave_raw_input(term, capsys):
    with patch('curtsies.Input') as input_cls:
        terminal = TerminalInterface(term)
        terminal.setup()
        input_cls.assert_called_once_with(keynames='curtsies', disable_terminal_start_stop=True)
        input_cls.return_value.__enter__.assert_called_once()
        assert terminal.is_fullscreen

        terminal.cleanup()
        input_cls.return_value.__exit__.assert_called_once()
        assert not terminal.is_fullscreen

    out = capsys.readouterr().out
    assert "<enter>" in out
    assert "<exit>" in out


def test_cleanup_is_idempotent(term, capsys):
    terminal = TerminalInterface(term)
    terminal.cleanup()
    terminal.cleanup()
    assert capsys.readouterr().out == ""


def test_setup_failure_raises_terminal_init_error(term, capsys):
    with patch('curtsies.Input', side_effect=OSError("not a tty")):
        terminal = TerminalInterface(term)
        with pytest.raises(TerminalInitError):
            with terminal:
                pass
    # Fullscreen was entered before the failure and has been left again
    assert not terminal.is_fullscreen
    assert "<exit>" in capsys.readouterr().out


def test_draw_frame_pads_rows_and_places_cursor(term, capsys):
    terminal = TerminalInterface(term)
    terminal.draw_frame(["abc", "a very long row", "~"], "status", 1, 2)
    terminal.flush()
    out = capsys.readouterr().out
    assert "[0,0]abc       " in out
    assert "[1,0]a very lon" in out
    assert "[2,0]~         " in out
    assert "[3,0]status    " in out
    assert out.endswith("[1,2]")


def test_get_key_without_setup_returns_none(term):
    terminal = TerminalInterface(term)
    assert terminal.get_key() is None


def test_get_key_reads_curtsies_event(term):
    terminal = TerminalInterface(term)
    terminal._curtsies_input = iter(['<UP>'])
    assert terminal.get_key() == '<UP>'


def test_one_row_screen_has_no_status_row(term, capsys):
    term.height = 1
    terminal = TerminalInterface(term)
    terminal.draw_frame(["text"], "status", 0, 0)
    out = capsys.readouterr().out
    assert "[0,0]text      " in out
    assert "status" not in out
