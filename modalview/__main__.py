"""Modalview CLI entry point.

Allows running via `python -m modalview` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

logger = logging.getLogger(__name__)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> int:
    """Run an interactive keyboard test using the editor's input stack.

    Prints each parsed key event and the code it would add to the command
    buffer. Quit with ESC.
    """
    from .errors import FatalIOError
    from .keyboard import KeyboardHandler, KeyType
    from .terminal import TerminalInterface

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    kb = KeyboardHandler(term)
    try:
        try:
            term.setup()
            while True:
                ev = kb.get_key_event(timeout=None)
                if not ev:
                    continue
                if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                    print("Exiting keyboard test.")
                    break
                parts = [
                    f"type={ev.key_type.value}",
                    f"value={ev.value}",
                    f"raw='{_escape_bytes(ev.raw)}'",
                    f"code='{_escape_bytes(ev.code)}'",
                ]
                print(' '.join(parts), flush=True)
        finally:
            term.restore_mode()
    except FatalIOError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing to support keyboard test mode, version, and optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    from .settings import configure_logging, load_settings
    settings = load_settings()
    configure_logging(settings)

    if args and args[0] in ('--keytest', '--keyboard-test'):
        return run_keyboard_test()

    from .editor import Editor
    from .errors import FatalIOError

    editor = Editor(settings=settings)
    if args:
        try:
            editor.load_file(args[0])
        except FatalIOError as e:
            logger.error(f"Fatal: {e}")
            print(e, file=sys.stderr)
            return 1
    return editor.run()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
