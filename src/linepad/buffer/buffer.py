"""List-of-lines buffer with a clamped two-dimensional cursor."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Sequence

from linepad.runtime import telemetry

from .state import BufferSnapshot, Cursor, Direction
from .sync import BufferMirror
from .validation import ensure_cursor


class LineBuffer:
    """Ordered lines plus a ``(row, col)`` cursor.

    The buffer is never empty: it always holds at least one (possibly empty)
    line, and the cursor always satisfies ``0 <= row < len(lines)`` and
    ``0 <= col <= len(lines[row])``. Every operation validates the cursor
    with ``ensure_cursor`` before indexing, so a broken invariant surfaces as
    ``BufferValidationError`` instead of silently corrupting text.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        cursor: Cursor = (0, 0),
        name: str = "scratch",
    ) -> None:
        self.name = name
        self._lines: List[str] = list(lines) if lines is not None else [""]
        if not self._lines:
            self._lines = [""]
        self._cursor: Cursor = ensure_cursor(self._lines, cursor)
        self.version = 0

    @classmethod
    def from_text(cls, text: str, *, name: str = "scratch") -> "LineBuffer":
        return cls(text.split("\n"), name=name)

    @property
    def lines(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def set_cursor(self, row: int, col: int) -> None:
        self._cursor = ensure_cursor(self._lines, (row, col))

    # -- editing -----------------------------------------------------------

    def insert_text(self, fragment: str) -> Cursor:
        """Insert ``fragment`` at the cursor and advance past all of it."""

        with self._mutation("insert_text", length=len(fragment)):
            row, col = ensure_cursor(self._lines, self._cursor)
            line = self._lines[row]
            self._lines[row] = line[:col] + fragment + line[col:]
            self._cursor = (row, col + len(fragment))
        return self._cursor

    def insert_line_break(self) -> Cursor:
        with self._mutation("insert_line_break"):
            row, col = ensure_cursor(self._lines, self._cursor)
            line = self._lines[row]
            self._lines[row : row + 1] = [line[:col], line[col:]]
            self._cursor = (row + 1, 0)
        return self._cursor

    def can_delete_backward(self) -> bool:
        return self._cursor != (0, 0)

    def delete_backward(self) -> bool:
        """Delete the character before the cursor, joining lines at column 0.

        Returns ``False`` (and changes nothing) at the very start of the
        buffer.
        """

        row, col = ensure_cursor(self._lines, self._cursor)
        if row == 0 and col == 0:
            return False

        with self._mutation("delete_backward"):
            if col > 0:
                line = self._lines[row]
                self._lines[row] = line[: col - 1] + line[col:]
                self._cursor = (row, col - 1)
            else:
                previous = self._lines[row - 1]
                self._lines[row - 1] = previous + self._lines[row]
                del self._lines[row]
                self._cursor = (row - 1, len(previous))
        return True

    def move_cursor(self, direction: Direction) -> bool:
        """Move one step in ``direction``; ``False`` when already at the edge.

        Horizontal moves never wrap to a neighbouring line. Vertical moves
        keep the column, clamped to the destination line's length.
        """

        row, col = ensure_cursor(self._lines, self._cursor)
        direction = Direction(direction)
        if direction is Direction.LEFT:
            target = (row, col - 1) if col > 0 else None
        elif direction is Direction.RIGHT:
            target = (row, col + 1) if col < len(self._lines[row]) else None
        elif direction is Direction.UP:
            target = (row - 1, col) if row > 0 else None
        else:
            target = (row + 1, col) if row < len(self._lines) - 1 else None

        if target is None:
            return False
        self._cursor = self._clamp(*target)
        return True

    # -- snapshots ---------------------------------------------------------

    def snapshot(self) -> BufferSnapshot:
        return BufferSnapshot.of(self._lines)

    def restore(self, snapshot: BufferSnapshot) -> None:
        """Install ``snapshot`` wholesale; snapshots carry no cursor, so it
        returns to the origin."""

        with self._mutation("restore", lines=len(snapshot.lines)):
            self._lines = list(snapshot.lines)
            self._cursor = (0, 0)

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            lines=tuple(self._lines), cursor=self._cursor, version=self.version
        )

    # -- internals ---------------------------------------------------------

    def _clamp(self, row: int, col: int) -> Cursor:
        row = max(0, min(row, len(self._lines) - 1))
        col = max(0, min(col, len(self._lines[row])))
        return (row, col)

    @contextmanager
    def _mutation(self, label: str, **metadata: object) -> Iterator[None]:
        with telemetry.span(
            f"buffer::{label}",
            logger_name="linepad.buffer",
            component="buffer",
            metadata={"buffer": self.name, **metadata},
        ):
            yield
            self.version += 1

    def __repr__(self) -> str:
        return (
            f"LineBuffer(name={self.name!r}, lines={len(self._lines)}, "
            f"cursor={self._cursor!r}, version={self.version})"
        )


__all__ = ["LineBuffer"]
