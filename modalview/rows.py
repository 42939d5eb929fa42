"""Row storage for the loaded text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import FatalIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """One line of loaded text, without its line terminator."""
    chars: str

    @property
    def size(self) -> int:
        return len(self.chars)


class RowStore:
    """Ordered sequence of rows, filled once at load time."""

    def __init__(self, rows: Optional[list[Row]] = None):
        self._rows: list[Row] = list(rows) if rows else []

    @classmethod
    def from_lines(cls, lines) -> "RowStore":
        """Build a store from plain strings (no terminator stripping)."""
        return cls([Row(line) for line in lines])

    def append(self, chars: str) -> None:
        self._rows.append(Row(chars))

    def row_count(self) -> int:
        return len(self._rows)

    def row_at(self, index: int) -> Optional[Row]:
        """Return the row at ``index`` or None when out of range."""
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def row_length(self, index: int) -> int:
        """Length of row ``index``; 0 when there is no such row."""
        row = self.row_at(index)
        return row.size if row else 0

    def clear(self) -> None:
        """Release every row."""
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)


def load_rows(path: str) -> RowStore:
    """Load ``path`` into a RowStore, one row per line.

    Trailing CR/LF characters are stripped; everything else (tabs included)
    is kept verbatim.

    Raises:
        FatalIOError: if the file cannot be opened or read.
    """
    store = RowStore()
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            for line in f:
                store.append(line.rstrip("\r\n"))
    except OSError as e:
        raise FatalIOError("fopen", e) from e
    logger.debug(f"Loaded {store.row_count()} rows from {path}")
    return store
