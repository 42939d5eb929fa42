"""Main editor controller: state aggregate and run loop."""

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional

from .command_buffer import CommandBuffer
from .commands import CommandRegistry
from .constants import EditorConstants
from .errors import FatalIOError
from .keyboard import KeyEvent, create_keyboard_handler
from .model import CursorModel
from .modes import Mode, ModeStateMachine
from .rows import RowStore, load_rows
from .settings import Settings
from .terminal import TerminalInterface
from .view import FrameComposer

logger = logging.getLogger(__name__)


@dataclass
class EditorState:
    """Everything the editor mutates, owned by a single Editor."""
    rows: RowStore = field(default_factory=RowStore)
    cursor_model: CursorModel = field(init=False)
    command_buffer: CommandBuffer = field(default_factory=CommandBuffer)
    mode: Mode = Mode.NORMAL
    screen_rows: int = EditorConstants.DEFAULT_ROWS
    screen_cols: int = EditorConstants.DEFAULT_COLUMNS
    filename: Optional[str] = None

    def __post_init__(self):
        self.cursor_model = CursorModel(self.rows)

    def replace_rows(self, rows: RowStore) -> None:
        """Install a freshly loaded row store and reset the cursor."""
        self.rows = rows
        self.cursor_model = CursorModel(rows)

    def release_rows(self) -> None:
        self.rows.clear()


class Editor:
    """Modal text viewer application controller."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[Settings] = None):
        """Initialize the editor components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = create_keyboard_handler(self.terminal)
        self.settings = settings or Settings()
        self.state = EditorState()
        self.command_registry = CommandRegistry()
        self.modes = ModeStateMachine(self.command_registry)
        self.composer = FrameComposer()
        self.running = False

    def load_file(self, filename: str) -> None:
        """Load a file into the editor.

        Raises:
            FatalIOError: if the file cannot be opened.
        """
        self.state.replace_rows(load_rows(filename))
        self.state.filename = filename
        logger.info(f"Opened {filename} ({self.state.rows.row_count()} rows)")

    def quit(self) -> None:
        """Clear the screen and stop the main loop."""
        self.terminal.clear_screen()
        self.running = False

    def run(self) -> int:
        """Run the main editor loop.

        The terminal is always restored before returning. On a fatal error
        rows are released and the screen cleared first, then the error is
        printed once the terminal is back in its original mode.

        Returns:
            Process exit code: 0 after quitting, 1 after a fatal error.
        """
        exit_code = 0
        error: Optional[FatalIOError] = None
        try:
            self.terminal.setup()
            rows, cols = self.terminal.get_window_size()
            self.state.screen_rows, self.state.screen_cols = rows, cols
            logger.debug(f"Window size {rows}x{cols}")
            self.running = True
            while self.running:
                self._draw()
                key_event = self.keyboard.wait_for_key_event(self.settings.key_timeout)
                self._handle_key_event(key_event)
        except FatalIOError as e:
            error = e
            exit_code = 1
            self.running = False
            self.state.release_rows()
            self.terminal.clear_screen()
        finally:
            try:
                self.terminal.restore_mode()
            except FatalIOError as e:
                error = error or e
                exit_code = 1

        if error is not None:
            logger.error(f"Fatal: {error}")
            print(error, file=sys.stderr)
        return exit_code

    def _draw(self) -> None:
        """Draw the current editor state to terminal."""
        self.terminal.draw_frame(self.composer.compose(self.state))

    def _handle_key_event(self, key_event: KeyEvent) -> None:
        """Handle a keyboard event."""
        self.modes.dispatch(self, key_event)
