"""Keyboard input handling using curtsies-style tokens."""

import logging
from typing import Optional
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

ESCAPE = '\x1b'
ENTER = '\r'


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
    value: str  # The base key (e.g., 'a', 'left', 'delete')
    raw: str  # The raw key string from curtsies
    is_alt: bool = False
    is_ctrl: bool = False
    is_sequence: bool = False

    @property
    def code(self) -> str:
        """Key code as stored in the command buffer.

        Printable keys are the character itself; Enter is CR, Escape is
        ESC and Ctrl-<x> is the matching control character. Other special
        keys keep their token form (e.g. ``<delete>``) so they never
        collide with a typed character.
        """
        if self.key_type == KeyType.REGULAR:
            return self.value
        if self.key_type == KeyType.SPECIAL:
            if self.value == 'enter':
                return ENTER
            if self.value == 'escape':
                return ESCAPE
        if self.key_type == KeyType.CTRL and len(self.value) == 1:
            return chr(ord(self.value.upper()) & 0x1f)
        return f"<{self.value}>"

    def is_escape_chord(self) -> bool:
        """True for Escape, Ctrl-C and Ctrl-[."""
        if self.key_type == KeyType.SPECIAL and self.value == 'escape':
            return True
        return self.key_type == KeyType.CTRL and self.value in ('c', '[')


class KeyboardHandler:
    """Handles keyboard input using curtsies-style key names."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if ``timeout`` elapsed first."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def wait_for_key_event(self, timeout: float) -> KeyEvent:
        """Block until a key arrives, polling every ``timeout`` seconds."""
        while True:
            event = self.get_key_event(timeout)
            if event is not None:
                return event

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name (or raw character) into a KeyEvent."""
        key_str = str(key)

        # curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1]
            lower = name.lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            # '<Ctrl-->' splits into an empty base
            if base == '' and lower.endswith('-'):
                base = '-'
            if 'meta' in mods or 'esc' in mods:
                mods.add('alt')

            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base == 'tab' and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
            if 'ctrl' in mods and len(base) == 1:
                # Ctrl-J / Ctrl-M are what terminals send for Enter
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str, is_sequence=True)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if 'alt' in mods:
                return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True, is_sequence=True)
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=ESCAPE)
            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)

        # Raw DEL escape sequence, if the provider hands one through undecoded
        if key_str == '\x1b[3~':
            return KeyEvent(key_type=KeyType.SPECIAL, value='delete', raw=key_str, is_sequence=True)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26:
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)
            if key_str == ESCAPE:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=ESCAPE)

        if key_str.startswith(ESCAPE):
            logger.debug(f"Unrecognized escape sequence {key_str!r}")
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)


def create_keyboard_handler(terminal_interface):
    """Factory function to create a keyboard handler.

    Args:
        terminal_interface: TerminalInterface instance

    Returns:
        KeyboardHandler instance
    """
    return KeyboardHandler(terminal_interface)
