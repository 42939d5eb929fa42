"""Cursor and viewport coordinate model."""

from dataclasses import dataclass

from .constants import EditorConstants
from .rows import RowStore


@dataclass
class Cursor:
    """Logical cursor position into the row store (not screen-relative)."""
    column: int = 0
    row: int = 0


@dataclass
class Viewport:
    """Top-left row store coordinate currently visible on screen."""
    row_offset: int = 0
    column_offset: int = 0


class CursorModel:
    """Keeps the cursor valid against the row store and scrolls the view.

    ``sticky_column`` remembers the last horizontal intent so that vertical
    motion through short rows can return to it on longer ones. Only
    horizontal motion updates it.
    """

    def __init__(self, rows: RowStore):
        self.rows = rows
        self.cursor = Cursor()
        self.viewport = Viewport()
        self.sticky_column = 0

    @property
    def last_row_index(self) -> int:
        return max(self.rows.row_count() - 1, 0)

    def current_row_length(self) -> int:
        return self.rows.row_length(self.cursor.row)

    def is_empty(self) -> bool:
        return self.rows.row_count() == 0

    # --- Motions ---

    def move_vertical(self, delta: int) -> None:
        """Move ``delta`` rows, clamped, then reconcile the column."""
        if self.is_empty():
            return
        target = self.cursor.row + delta
        self.cursor.row = min(max(target, 0), self.last_row_index)
        self._reconcile_column()

    def move_horizontal(self, delta: int) -> bool:
        """Move ``delta`` columns within ``[0, rowLength]``.

        Returns True when the cursor actually moved; only then is the
        sticky column updated.
        """
        if self.is_empty():
            return False
        target = self.cursor.column + delta
        target = min(max(target, 0), self.current_row_length())
        if target == self.cursor.column:
            return False
        self.cursor.column = target
        self.sticky_column = target
        return True

    def jump_to_first_row(self) -> None:
        if self.is_empty():
            return
        self.cursor.row = 0
        self._reconcile_column()

    def jump_to_last_row(self) -> None:
        if self.is_empty():
            return
        self.cursor.row = self.last_row_index
        self._reconcile_column()

    def _reconcile_column(self) -> None:
        length = self.current_row_length()
        if self.sticky_column < length:
            self.cursor.column = self.sticky_column
        else:
            self.cursor.column = max(length - 1, 0)

    # --- Scrolling ---

    def scroll_to_fit(self, screen_rows: int, screen_cols: int) -> Viewport:
        """Adjust the viewport so the cursor is visible and return it.

        Two screen lines are reserved for the status and command lines; no
        margin is reserved horizontally.
        """
        visible_rows = max(screen_rows - EditorConstants.RESERVED_LINES, 1)
        visible_cols = max(screen_cols, 1)
        vp = self.viewport
        if self.cursor.row < vp.row_offset:
            vp.row_offset = self.cursor.row
        elif self.cursor.row >= vp.row_offset + visible_rows:
            vp.row_offset = self.cursor.row - visible_rows + 1
        if self.cursor.column < vp.column_offset:
            vp.column_offset = self.cursor.column
        elif self.cursor.column >= vp.column_offset + visible_cols:
            vp.column_offset = self.cursor.column - visible_cols + 1
        return vp
