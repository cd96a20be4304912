"""Main editor controller: the edit session loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .errors import DocumentLoadError, InputError
from .keyboard import KeyboardHandler, KeyEvent
from .model import TextBuffer
from .terminal import TerminalInterface
from .view import screen_cursor, status_text, visible_rows

logger = logging.getLogger(__name__)


def read_lines(filename: str) -> list[str]:
    """Read a text file as a list of lines without their terminators.

    Raises:
        DocumentLoadError: the file is missing, unreadable or not valid text
    """
    try:
        with open(filename, 'r', encoding=EditorConstants.FILE_ENCODING) as f:
            return [line.rstrip('\n') for line in f]
    except FileNotFoundError as e:
        logger.warning(f"File not found: {filename}")
        raise DocumentLoadError(filename, "no such file") from e
    except PermissionError as e:
        logger.warning(f"Permission denied reading {filename}")
        raise DocumentLoadError(filename, "permission denied") from e
    except UnicodeDecodeError as e:
        logger.warning(f"Could not decode {filename}: {e}")
        raise DocumentLoadError(filename, f"not valid {EditorConstants.FILE_ENCODING} text") from e
    except OSError as e:
        logger.warning(f"Could not read {filename}: {e}")
        raise DocumentLoadError(filename, e.strerror or str(e)) from e


class Editor:
    """Owns the document buffer and drives it from terminal input."""

    def __init__(self, terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components.

        The terminal is only entered by run(), so constructing an editor
        has no effect on the screen.
        """
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.buffer = TextBuffer()
        self.command_registry = CommandRegistry()
        self.running = False
        self.filename: Optional[str] = None
        self.modified = False

    def load_file(self, filename: str):
        """Load a file into the editor.

        The buffer is only replaced once the whole file has been read.

        Raises:
            DocumentLoadError: if the file cannot be read
        """
        lines = read_lines(filename)
        self.buffer.load(lines)
        self.filename = filename
        self.modified = False
        logger.debug(f"Opened {filename} ({self.buffer.line_count} lines)")

    def request_quit(self):
        """Stop the loop after the current iteration."""
        self.running = False

    def run(self):
        """Run the main editor loop.

        The terminal is entered once and restored on every way out,
        including an input failure, which ends the session like a quit.
        """
        self.running = True
        try:
            self.terminal.setup()
            logger.debug("Edit session started")
            while self.running:
                self._draw()
                self.terminal.flush()

                try:
                    key_event = self.keyboard.get_key_event(timeout=None)
                except InputError as e:
                    logger.error(f"Input failed, ending session: {e}")
                    self.running = False
                    break

                if key_event:
                    self._handle_key_event(key_event)
        except KeyboardInterrupt:
            # Ctrl-C ends the session like a quit
            self.running = False
        finally:
            self.running = False
            try:
                self.terminal.flush()
            finally:
                self.terminal.cleanup()
            logger.debug("Edit session ended")

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.buffer.resize(self.terminal.width, self.terminal.height)
        rows = visible_rows(self.buffer)
        cursor_y, cursor_x = screen_cursor(self.buffer)
        status = status_text(self.buffer, self.filename, width=self.terminal.width,
                             modified=self.modified)
        self.terminal.draw_frame(rows, status, cursor_y, cursor_x)

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True
