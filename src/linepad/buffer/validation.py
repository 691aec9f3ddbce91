"""Index guards shared by buffer operations."""

from __future__ import annotations

from typing import Sequence

from .state import Cursor
from .sync import BufferValidationError


def ensure_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= len(lines):
        raise BufferValidationError("Row out of range", cursor=cursor)
    if col < 0 or col > len(lines[row]):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor
