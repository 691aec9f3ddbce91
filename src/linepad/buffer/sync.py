"""Boundary types shared between the buffer and whatever renders it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .state import Cursor


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Read-only view of the buffer handed to the renderer."""

    lines: Tuple[str, ...]
    cursor: Cursor
    version: int = 0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when a cursor falls outside the buffer.

    Every mutation keeps the cursor clamped, so seeing this means an editing
    path broke the invariant; it is never a user-facing condition.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
