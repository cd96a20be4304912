"""Keyboard input handling using curtsies-style tokens."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InputError

logger = logging.getLogger(__name__)


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'tab', 'page_up', 'page_down', 'insert',
}

# Single characters that terminals send for named keys
RAW_SPECIALS = {
    '\t': 'tab',
    '\n': 'enter',
    '\r': 'enter',
    '\x7f': 'backspace',
    '\x08': 'backspace',
}


class KeyboardHandler:
    """Turns curtsies key names into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Wait for the next key and parse it.

        Returns None on timeout. Raises InputError if the terminal cannot be
        read.
        """
        try:
            key = self.terminal.get_key(timeout)
        except (OSError, ValueError, StopIteration) as e:
            raise InputError(f"Error reading keyboard input: {e}") from e
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name into a KeyEvent.

        Args:
            key: curtsies key name such as 'a', '<UP>' or '<Ctrl-q>'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        if key_str in RAW_SPECIALS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=RAW_SPECIALS[key_str], raw=key_str)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        lower = key_str[1:-1].lower().replace('+', '-')
        parts = lower.split('-')
        base = parts[-1] or '-'
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if base in ('esc', 'escape') and not mods:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
        if 'ctrl' in mods and len(base) == 1:
            # Ctrl-J / Ctrl-M are what terminals send for Enter, Ctrl-H for Backspace
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if base == 'h':
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if base == 'i':
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        if 'alt' in mods:
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str,
                            is_shift='shift' in mods, is_ctrl='ctrl' in mods)

        # Unknown token: treat as special so it is never inserted as text
        logger.debug(f"Unrecognised key {key_str!r}")
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
