"""Bounded buffer of keys awaiting recognition as a command."""

from typing import Optional

from .constants import EditorConstants


class CommandBuffer:
    """Keystrokes typed in Normal mode that have not formed a command yet.

    One slot of ``capacity`` is reserved for the terminator, so at most
    ``capacity - 1`` keys are ever held.
    """

    def __init__(self, capacity: int = EditorConstants.COMMAND_BUFFER_CAPACITY):
        if capacity < 2:
            raise ValueError("capacity must leave room for at least one key")
        self.capacity = capacity
        self._keys: list[str] = []

    @property
    def limit(self) -> int:
        """Maximum number of keys held."""
        return self.capacity - 1

    def push(self, key: str) -> bool:
        """Append ``key``. Returns True (overflowed) if the buffer was full."""
        if len(self._keys) >= self.limit:
            return True
        self._keys.append(key)
        return False

    def clear(self) -> None:
        self._keys.clear()

    def collapse_to(self, key: str) -> None:
        """Discard everything and keep only ``key``."""
        self._keys = [key]

    def contents(self) -> tuple[str, ...]:
        return tuple(self._keys)

    def at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._keys):
            return self._keys[index]
        return None

    @property
    def first(self) -> Optional[str]:
        return self.at(0)

    @property
    def last(self) -> Optional[str]:
        return self._keys[-1] if self._keys else None

    @property
    def is_full(self) -> bool:
        return len(self._keys) >= self.limit

    def startswith(self, keys) -> bool:
        keys = tuple(keys)
        return self.contents()[:len(keys)] == keys

    @property
    def text(self) -> str:
        """Display form of the buffer (printable keys only)."""
        return ''.join(k for k in self._keys if len(k) == 1 and k.isprintable())

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)
