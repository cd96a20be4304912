"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import select
import sys
from typing import Optional

import blessed

from .constants import EditorConstants
from .errors import TerminalInitError

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def __enter__(self) -> "TerminalInterface":
        try:
            self.setup()
        except BaseException:
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False

    def setup(self):
        """Enter fullscreen mode and raw keyboard input.

        Raises TerminalInitError if raw input cannot be established; the
        caller is expected to call cleanup() regardless.
        """
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            try:
                from curtsies import Input
                # Keep ^S/^Q away from tty flow control so Ctrl-Q reaches us
                inp = Input(keynames='curtsies', disable_terminal_start_stop=True)
                inp.__enter__()
            except Exception as e:
                raise TerminalInitError(f"Cannot enter raw input mode: {e}") from e
            self._curtsies_input = inp
        logger.debug("Terminal set up")

    def cleanup(self):
        """Exit raw mode and fullscreen; safe to call more than once."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except Exception as e:
                # Teardown must still leave fullscreen below
                logger.warning(f"Could not restore terminal input mode: {e}")
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal_cursor, end='')
            print(self.term.exit_fullscreen, end='', flush=True)
            self.is_fullscreen = False
        logger.debug("Terminal cleaned up")

    def clear_screen(self):
        """Clear the entire screen."""
        print(self.term.home + self.term.clear, end='')

    def draw_frame(self, rows: list[str], status: str, cursor_y: int, cursor_x: int):
        """Paint text rows, the status line, and place the cursor.

        Rows are padded or truncated to the terminal width. Output is not
        flushed; call flush() to commit the frame.
        """
        width = self.width
        print(self.term.hide_cursor, end='')
        self.clear_screen()
        for y, line in enumerate(rows):
            print(self.term.move(y, 0) + line[:width].ljust(width), end='')
        # A screen with no room below the text has no status row
        if self.term.height > EditorConstants.STATUS_ROWS:
            print(self.term.move(self.term.height - 1, 0) + self.term.reverse
                  + status[:width].ljust(width) + self.term.normal, end='')
        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='')

    def flush(self):
        """Commit everything drawn so far."""
        sys.stdout.flush()

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name as a string, or None on timeout or when
            input has not been set up.
        """
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        evt = next(self._curtsies_input)
        if evt is None:
            return None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows, including the status line."""
        return self.term.height
