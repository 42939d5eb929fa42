"""Shared helpers for driving the editor without a real terminal."""

from unittest.mock import MagicMock

from modalview.editor import Editor
from modalview.keyboard import KeyboardHandler
from modalview.rows import RowStore

_parser = KeyboardHandler(MagicMock())


def make_editor(lines=None, screen_rows=24, screen_cols=80):
    """Editor over ``lines`` with a mocked terminal."""
    editor = Editor(terminal=MagicMock())
    if lines is not None:
        editor.state.replace_rows(RowStore.from_lines(lines))
    editor.state.screen_rows = screen_rows
    editor.state.screen_cols = screen_cols
    editor.running = True
    return editor


def key(token):
    """Parse a curtsies-style token or character into a KeyEvent."""
    return _parser.parse_key(token)


def press(editor, *tokens):
    """Feed keys to the editor. A plain string is split into characters."""
    for token in tokens:
        if len(token) > 1 and not token.startswith('<'):
            for ch in token:
                editor._handle_key_event(key(ch))
        else:
            editor._handle_key_event(key(token))
