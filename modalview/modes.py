"""Editor modes and the per-key dispatch between them."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .commands import CommandRegistry
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Input modes. Normal is the initial mode."""
    NORMAL = "NORMAL"
    INSERT = "INSERT"
    VISUAL = "VISUAL"

    @property
    def display_name(self) -> str:
        return self.value


class ModeHandler(ABC):
    """Handles keys while its mode is active."""

    @abstractmethod
    def handle(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        pass


class NormalModeHandler(ModeHandler):
    """Feeds keys to the command parser."""

    def __init__(self, registry: 'CommandRegistry'):
        self.registry = registry

    def handle(self, editor, key_event):
        self.registry.process_normal_key(editor, key_event.code)


class InsertModeHandler(ModeHandler):
    # Text insertion is not supported; only the global escape leaves this mode.
    def handle(self, editor, key_event):
        pass


class VisualModeHandler(ModeHandler):
    # No command enters Visual mode yet; it is kept so it can be displayed.
    def handle(self, editor, key_event):
        pass


class ModeStateMachine:
    """Routes each key to the active mode's handler.

    After the handler runs, Escape, Ctrl-C and Ctrl-[ return the editor to
    Normal mode from any mode.
    """

    def __init__(self, registry: 'CommandRegistry',
                 handlers: Optional[Dict[Mode, ModeHandler]] = None):
        self.handlers: Dict[Mode, ModeHandler] = {
            Mode.NORMAL: NormalModeHandler(registry),
            Mode.INSERT: InsertModeHandler(),
            Mode.VISUAL: VisualModeHandler(),
        }
        if handlers:
            self.handlers.update(handlers)

    def dispatch(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        state = editor.state
        self.handlers[state.mode].handle(editor, key_event)
        if key_event.is_escape_chord() and state.mode != Mode.NORMAL:
            logger.debug(f"Leaving {state.mode.display_name} mode")
            state.mode = Mode.NORMAL
