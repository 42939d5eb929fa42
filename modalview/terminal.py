"""Terminal interface using Blessed for display and Curtsies for input."""

import io
import logging
import os
import sys
import termios
from typing import Optional

import blessed
from curtsies import Input  # type: ignore

from .constants import EditorConstants
from .errors import FatalIOError

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Owns raw-mode entry and restoration, key acquisition, window-size
    discovery and painting of composed frames.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self._curtsies_input: Optional[object] = None
        self._original_attrs: Optional[list] = None
        self.is_raw = False

    @property
    def stream(self):
        return self.term.stream

    def _input_fd(self) -> int:
        return sys.stdin.fileno()

    def _output_fd(self) -> int:
        return self.stream.fileno()

    def _write(self, data: str) -> None:
        self.stream.write(data)
        self.stream.flush()

    # --- Mode handling ---

    def setup(self) -> None:
        """Enter raw mode.

        Raises:
            FatalIOError: if terminal attributes cannot be read or set.
        """
        fd = self._input_fd()
        try:
            self._original_attrs = termios.tcgetattr(fd)
        except (termios.error, OSError) as e:
            raise FatalIOError("tcgetattr", e) from e

        try:
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()
            raw = termios.tcgetattr(fd)
        except (termios.error, OSError) as e:
            self._curtsies_input = None
            self._original_attrs = None
            raise FatalIOError("tcsetattr", e) from e

        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
        except (termios.error, OSError) as e:
            self.restore_mode()
            raise FatalIOError("tcsetattr", e) from e
        self.is_raw = True
        logger.debug("Entered raw mode")

    def restore_mode(self) -> None:
        """Restore the terminal attributes saved by setup().

        Safe to call more than once; does nothing if setup() never ran.

        Raises:
            FatalIOError: if the saved attributes cannot be applied.
        """
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None
        if self._original_attrs is None:
            return
        attrs, self._original_attrs = self._original_attrs, None
        self.is_raw = False
        try:
            termios.tcsetattr(self._input_fd(), termios.TCSAFLUSH, attrs)
        except (termios.error, OSError) as e:
            raise FatalIOError("tcsetattr", e) from e
        logger.debug("Restored terminal mode")

    # --- Input ---

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if the timeout expired or input
            is not set up.
        """
        if self._curtsies_input is None:
            return None
        # Input.send drains bytes curtsies already buffered before polling
        # the fd, so keys arriving in one read are delivered one per call.
        if timeout is None:
            evt = next(self._curtsies_input)
        else:
            evt = self._curtsies_input.send(float(timeout))
            if evt is None:
                return None
        return str(evt)


    # --- Geometry ---

    def get_window_size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the terminal.

        Falls back to moving the cursor to the far bottom-right corner and
        asking the terminal where it ended up.

        Raises:
            FatalIOError: if neither method yields a size.
        """
        try:
            size = os.get_terminal_size(self._output_fd())
            if size.columns > 0 and size.lines > 0:
                return size.lines, size.columns
        except (OSError, ValueError, io.UnsupportedOperation) as e:
            logger.debug(f"Terminal size ioctl unavailable: {e}")
        return self._measure_window_size()

    def _measure_window_size(self) -> tuple[int, int]:
        distance = EditorConstants.FAR_CORNER_DISTANCE
        self._write(self.term.move_right(distance) + self.term.move_down(distance))
        row, col = self.term.get_location(timeout=EditorConstants.CURSOR_QUERY_TIMEOUT)
        if row < 0 or col < 0:
            raise FatalIOError("getWindowSize")
        return row + 1, col + 1

    # --- Output ---

    def clear_screen(self) -> None:
        """Clear the entire screen and home the cursor."""
        self._write(self.term.clear + self.term.home)

    def draw_frame(self, frame) -> None:
        """Paint a composed frame with a single write.

        Every line is followed by clear-to-end-of-line; lines are separated
        by CRLF so no trailing newline scrolls the screen.
        """
        out = io.StringIO()
        out.write(self.term.hide_cursor)
        out.write(self.term.home)
        last = len(frame.lines) - 1
        for y, line in enumerate(frame.lines):
            out.write(line)
            out.write(self.term.clear_eol)
            if y < last:
                out.write('\r\n')
        out.write(self.term.move_yx(frame.cursor_y, frame.cursor_x))
        out.write(self.term.normal_cursor)
        self._write(out.getvalue())
