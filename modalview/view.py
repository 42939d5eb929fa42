"""Frame composition: turns editor state into a draw-list."""

from dataclasses import dataclass, field

from .constants import EditorConstants
from .version import banner_text


@dataclass
class Frame:
    """Lines to paint (top to bottom) and the screen cursor position."""
    lines: list[str] = field(default_factory=list)
    cursor_y: int = 0
    cursor_x: int = 0


def render_banner(screen_cols: int) -> str:
    """Center the version banner, with a filler glyph in the left margin."""
    text = banner_text()[:screen_cols]
    padding = (screen_cols - len(text)) // 2
    if padding:
        return EditorConstants.FILLER_GLYPH + ' ' * (padding - 1) + text
    return text


# surrogateescape maps each undecodable byte to one of U+DC80..U+DCFF.
_ESCAPED_BYTES = {code: '\ufffd' for code in range(0xDC80, 0xDD00)}


def displayable(text: str) -> str:
    """Replace undecodable bytes kept by surrogateescape with U+FFFD.

    Rows keep raw bytes as lone surrogates, which a strict UTF-8 stream
    refuses to encode. Each escaped byte becomes one replacement character,
    so screen columns are unchanged.
    """
    return text.translate(_ESCAPED_BYTES)


class FrameComposer:
    """Builds a Frame from the current EditorState.

    Content rows fill all but the last two screen lines. The two reserved
    lines are the mode status line and the command-echo line.
    """

    def compose(self, state) -> Frame:
        rows = state.rows
        cursor_model = state.cursor_model
        viewport = cursor_model.scroll_to_fit(state.screen_rows, state.screen_cols)
        visible_rows = max(state.screen_rows - EditorConstants.RESERVED_LINES, 0)

        lines = []
        for y in range(visible_rows):
            file_row = y + viewport.row_offset
            row = rows.row_at(file_row)
            if row is not None:
                start = viewport.column_offset
                lines.append(displayable(row.chars[start:start + state.screen_cols]))
            elif rows.row_count() == 0 and y == state.screen_rows // 3:
                lines.append(render_banner(state.screen_cols))
            else:
                lines.append(EditorConstants.FILLER_GLYPH)

        lines.append(self.status_line(state))
        lines.append(self.command_line(state))

        cursor = cursor_model.cursor
        return Frame(
            lines=lines,
            cursor_y=cursor.row - viewport.row_offset,
            cursor_x=cursor.column - viewport.column_offset,
        )

    def status_line(self, state) -> str:
        return f"-- {state.mode.display_name} --"

    def command_line(self, state) -> str:
        """Echo the command buffer only while a colon-command is typed."""
        buffer = state.command_buffer
        if buffer.first == ':':
            return buffer.text
        return ""
