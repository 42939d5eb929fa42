"""Modalview - a modal terminal text viewer."""

import logging

from .command_buffer import CommandBuffer
from .editor import Editor, EditorState
from .errors import FatalIOError
from .model import Cursor, CursorModel, Viewport
from .modes import Mode
from .rows import Row, RowStore, load_rows

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'CommandBuffer',
    'Cursor',
    'CursorModel',
    'Editor',
    'EditorState',
    'FatalIOError',
    'Mode',
    'Row',
    'RowStore',
    'Viewport',
    'load_rows',
]
