"""Snapshot-based undo/redo stacks."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from linepad.runtime import telemetry

from .state import BufferSnapshot


class HistoryState(str, Enum):
    CLEAN = "clean"  # nothing to redo
    DIVERGENT = "divergent"  # an undo happened and nothing has been edited since


class HistoryManager:
    """Linear undo/redo history over whole-buffer snapshots.

    The controller calls ``capture_before_mutation`` with the pre-edit state
    right before each edit; the edit itself never runs in here. Recording a
    new state drops the redo stack, so history never branches.
    """

    def __init__(self, *, max_depth: Optional[int] = None) -> None:
        if max_depth is not None and max_depth <= 0:
            raise ValueError("max_depth must be positive")
        self.max_depth = max_depth
        self._undo: List[BufferSnapshot] = []
        self._redo: List[BufferSnapshot] = []
        self.logger = telemetry.get_logger("linepad.history")

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    @property
    def state(self) -> HistoryState:
        return HistoryState.DIVERGENT if self._redo else HistoryState.CLEAN

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def capture_before_mutation(self, snapshot: BufferSnapshot) -> None:
        self._undo.append(snapshot)
        self._redo.clear()
        self._evict()

    def undo(self, current: BufferSnapshot) -> Optional[BufferSnapshot]:
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: BufferSnapshot) -> Optional[BufferSnapshot]:
        if not self._redo:
            return None
        restored = self._redo.pop()
        self._undo.append(current)
        self._evict()
        return restored

    def _evict(self) -> None:
        if self.max_depth is None or len(self._undo) <= self.max_depth:
            return
        dropped = len(self._undo) - self.max_depth
        del self._undo[:dropped]
        self.logger.debug(f"history::evict dropped={dropped} limit={self.max_depth}")

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __repr__(self) -> str:
        return (
            f"HistoryManager(undo={len(self._undo)}, redo={len(self._redo)}, "
            f"max_depth={self.max_depth})"
        )


__all__ = ["HistoryManager", "HistoryState"]
