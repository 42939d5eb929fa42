"""Command pattern implementation for Normal-mode key sequences."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, TYPE_CHECKING

from .modes import Mode

if TYPE_CHECKING:
    from .editor import Editor

logger = logging.getLogger(__name__)

COLON = ':'
LINE_TERMINATORS = ('\r', '\n')


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor') -> None:
        """Execute the command against the editor state."""
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor') -> None:
        self._move(editor.state.cursor_model)

    @abstractmethod
    def _move(self, cursor_model):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, cursor_model):
        if cursor_model.cursor.column > 0:
            cursor_model.move_horizontal(-1)


class RightCharCommand(MovementCommand):
    def _move(self, cursor_model):
        if cursor_model.cursor.column < cursor_model.current_row_length():
            cursor_model.move_horizontal(1)


class DownLineCommand(MovementCommand):
    def _move(self, cursor_model):
        # Reconciliation runs even on the last row
        delta = 1 if cursor_model.cursor.row < cursor_model.last_row_index else 0
        cursor_model.move_vertical(delta)


class UpLineCommand(MovementCommand):
    def _move(self, cursor_model):
        delta = -1 if cursor_model.cursor.row > 0 else 0
        cursor_model.move_vertical(delta)


class FirstRowCommand(MovementCommand):
    def _move(self, cursor_model):
        cursor_model.jump_to_first_row()


class LastRowCommand(MovementCommand):
    def _move(self, cursor_model):
        cursor_model.jump_to_last_row()


class EnterInsertModeCommand(EditorCommand):
    def execute(self, editor):
        editor.state.mode = Mode.INSERT


class QuitCommand(EditorCommand):
    """Quit immediately; there is nothing to save."""

    def execute(self, editor):
        editor.quit()


class CommandRegistry:
    """Recognizes commands in the Normal-mode command buffer.

    Two tables are consulted on every key, in order:

    * sequence commands, matched against the *start* of the buffer
      (``gg``, ``G``, ``h``, ``j``, ``k``, ``l``, ``i``);
    * suffix rules on the *last* key: ``:`` starts a colon-command and
      Enter completes one, looked up by the key after the colon.
    """

    def __init__(self):
        self._sequences: Dict[Tuple[str, ...], EditorCommand] = {}
        self._colon_commands: Dict[str, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        self.register(('g', 'g'), FirstRowCommand())
        self.register(('G',), LastRowCommand())
        self.register(('h',), LeftCharCommand())
        self.register(('l',), RightCharCommand())
        self.register(('j',), DownLineCommand())
        self.register(('k',), UpLineCommand())
        self.register(('i',), EnterInsertModeCommand())

        self.register_colon('q', QuitCommand())

    def register(self, keys: Tuple[str, ...], command: EditorCommand):
        """Register a command for a key sequence."""
        if not keys or keys[0] == COLON:
            raise ValueError(f"invalid command sequence: {keys!r}")
        self._sequences[tuple(keys)] = command

    def register_colon(self, key: str, command: EditorCommand):
        """Register a colon-command selected by the key after ``:``."""
        self._colon_commands[key] = command

    def get_command(self, buffer) -> Optional[EditorCommand]:
        """Return the sequence command the buffer starts with, if any."""
        first = buffer.first
        for keys, command in self._sequences.items():
            if keys[0] == first and buffer.startswith(keys):
                return command
        return None

    def get_colon_command(self, key: Optional[str]) -> Optional[EditorCommand]:
        if key is None:
            return None
        return self._colon_commands.get(key)

    def process_normal_key(self, editor: 'Editor', code: str) -> None:
        """Feed one key code through the Normal-mode parser."""
        buffer = editor.state.command_buffer
        buffer.push(code)

        command = self.get_command(buffer)
        if command is not None:
            buffer.clear()
            command.execute(editor)
            return

        last = buffer.last
        if last == COLON:
            buffer.collapse_to(COLON)
            return
        if last in LINE_TERMINATORS:
            if buffer.first == COLON:
                colon_command = self.get_colon_command(buffer.at(1))
                if colon_command is not None:
                    buffer.clear()
                    colon_command.execute(editor)
                    return
                logger.debug(f"Unknown colon-command {buffer.text!r}")
            buffer.clear()
            return

        if buffer.is_full:
            logger.debug(f"Discarding unrecognized keys {buffer.contents()!r}")
            buffer.clear()

