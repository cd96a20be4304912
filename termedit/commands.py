"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MoveCaretCommand(EditorCommand):
    """Move the cursor by a fixed delta."""

    def __init__(self, delta_row: int, delta_col: int):
        self.delta_row = delta_row
        self.delta_col = delta_col

    def execute(self, editor, key_event):
        editor.buffer.move_caret(self.delta_row, self.delta_col)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._edit(editor, key_event)
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.backspace()


class DeleteForwardCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.delete_forward()


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.buffer.insert_char(EditorConstants.NEWLINE)


class TabCommand(EditCommand):
    """Insert a fixed run of spaces; there are no tab stops."""

    def _edit(self, editor, key_event):
        for _ in range(EditorConstants.TAB_WIDTH):
            editor.buffer.insert_char(' ')


class InsertTextCommand(EditCommand):
    def execute(self, editor, key_event):
        char = key_event.value
        # Only single printable characters become text
        if len(char) != 1 or not char.isprintable():
            return False
        return super().execute(editor, key_event)

    def _edit(self, editor, key_event):
        editor.buffer.insert_char(key_event.value)


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.request_quit()
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), MoveCaretCommand(0, -1))
        self.register((KeyType.SPECIAL, 'right'), MoveCaretCommand(0, 1))
        self.register((KeyType.SPECIAL, 'up'), MoveCaretCommand(-1, 0))
        self.register((KeyType.SPECIAL, 'down'), MoveCaretCommand(1, 0))

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteForwardCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'tab'), TabCommand())

        # System commands
        self.register((KeyType.CTRL, EditorConstants.QUIT_KEY), QuitCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        # Handle regular text input
        if key_event.key_type == KeyType.REGULAR:
            return self._insert_text.execute(editor, key_event)

        return False
