"""Cursor coordinates, movement directions, and history snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

Cursor = Tuple[int, int]  # (row, column)


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class BufferSnapshot:
    """Frozen copy of a buffer's lines.

    Strings are immutable and the container is a tuple, so a snapshot never
    observes later edits to the buffer it was taken from.
    """

    lines: Tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        object.__setattr__(self, "lines", lines or ("",))

    @classmethod
    def of(cls, lines: Iterable[str]) -> "BufferSnapshot":
        return cls(lines=tuple(lines))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
