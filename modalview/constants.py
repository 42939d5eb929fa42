"""Constants and configuration for the modalview editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Command buffer: one slot is reserved for the terminator
    COMMAND_BUFFER_CAPACITY = 10

    # Screen layout
    RESERVED_LINES = 2  # Status line + command-echo line
    FILLER_GLYPH = "~"  # Drawn on rows past end of file
    BANNER_TEMPLATE = "Modalview editor -- version {}"

    # Keyboard timing
    KEY_POLL_TIMEOUT = 0.1  # Idle timeout for a single key read (seconds)

    # Window size fallback
    FAR_CORNER_DISTANCE = 999  # Columns/rows to move when measuring the window
    CURSOR_QUERY_TIMEOUT = 1.0  # Seconds to wait for a cursor position report

    # Fallback dimensions used before the terminal has been measured
    DEFAULT_ROWS = 24
    DEFAULT_COLUMNS = 80
