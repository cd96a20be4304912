"""Test keyboard input handling."""

import pytest
from unittest.mock import Mock
from termedit.errors import InputError
from termedit.keyboard import KeyboardHandler, KeyEvent, KeyType


class MockTerminal:
    """Mock terminal interface for testing."""

    def __init__(self):
        self._key_queue = []

    def get_key(self, timeout=None):
        """Mock get_key that returns from queue."""
        if self._key_queue:
            return self._key_queue.pop(0)
        return None

    def add_key(self, key_str):
        self._key_queue.append(key_str)


@pytest.fixture
def handler():
    return KeyboardHandler(MockTerminal())


@pytest.mark.parametrize("token,value", [
    ('<UP>', 'up'),
    ('<DOWN>', 'down'),
    ('<LEFT>', 'left'),
    ('<RIGHT>', 'right'),
    ('<BACKSPACE>', 'backspace'),
    ('<DELETE>', 'delete'),
    ('<TAB>', 'tab'),
    ('<Ctrl-j>', 'enter'),
    ('<Ctrl-m>', 'enter'),
    ('<Ctrl-h>', 'backspace'),
    ('<PAGEUP>', 'page_up'),
])
def test_named_special_keys(handler, token, value):
    event = handler.parse_key(token)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value
    assert event.raw == token


@pytest.mark.parametrize("raw,value", [
    ('\t', 'tab'),
    ('\n', 'enter'),
    ('\r', 'enter'),
    ('\x7f', 'backspace'),
    ('\x08', 'backspace'),
])
def test_raw_special_characters(handler, raw, value):
    event = handler.parse_key(raw)
    assert event.key_type == KeyType.SPECIAL
    assert event.value == value


def test_ctrl_q(handler):
    for token in ('<Ctrl-q>', '\x11'):
        event = handler.parse_key(token)
        assert event.key_type == KeyType.CTRL
        assert event.value == 'q'
        assert event.is_ctrl


def test_space_token_is_regular(handler):
    event = handler.parse_key('<SPACE>')
    assert event.key_type == KeyType.REGULAR
    assert event.value == ' '


def test_regular_characters(handler):
    for ch in ('a', 'Z', '<', '>', 'é'):
        event = handler.parse_key(ch)
        assert event.key_type == KeyType.REGULAR
        assert event.value == ch


def test_escape(handler):
    assert handler.parse_key('<ESC>').value == 'escape'
    assert handler.parse_key('\x1b').value == 'escape'


def test_alt_keys(handler):
    event = handler.parse_key('<Esc+b>')
    assert event.key_type == KeyType.ALT
    assert event.value == 'b'
    assert event.is_alt


def test_shift_arrow_keeps_base_key(handler):
    event = handler.parse_key('<Shift-LEFT>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'left'
    assert event.is_shift


def test_unknown_token_is_not_text(handler):
    event = handler.parse_key('<F5>')
    assert event.key_type == KeyType.SPECIAL
    assert event.value == 'f5'


def test_get_key_event_from_terminal():
    terminal = MockTerminal()
    handler = KeyboardHandler(terminal)
    terminal.add_key('<UP>')
    event = handler.get_key_event()
    assert event == KeyEvent(key_type=KeyType.SPECIAL, value='up', raw='<UP>')


def test_get_key_event_timeout_returns_none(handler):
    assert handler.get_key_event(timeout=0) is None


@pytest.mark.parametrize("error", [OSError("read failed"), StopIteration()])
def test_read_failure_raises_input_error(error):
    terminal = Mock()
    terminal.get_key.side_effect = error
    handler = KeyboardHandler(terminal)
    with pytest.raises(InputError):
        handler.get_key_event()
