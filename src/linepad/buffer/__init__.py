"""Line buffer, cursor model, and undo/redo history."""

from .buffer import LineBuffer
from .history import HistoryManager, HistoryState
from .state import BufferSnapshot, Cursor, Direction
from .sync import BufferMirror, BufferValidationError
from .validation import ensure_cursor

__all__ = [
    "BufferMirror",
    "BufferSnapshot",
    "BufferValidationError",
    "Cursor",
    "Direction",
    "HistoryManager",
    "HistoryState",
    "LineBuffer",
    "ensure_cursor",
]
