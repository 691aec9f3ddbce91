"""State and result types every editing action works against."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from linepad.buffer import HistoryManager, LineBuffer
from linepad.markup import DecorationLatch


@dataclass(slots=True)
class CommandResult:
    """Outcome of a single dispatched command."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    mutated: bool = False
    exit: bool = False


class EventBus:
    """Minimal event bus so adapters can observe what commands did."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class EditorContext:
    """Everything one editing session owns.

    Nothing here is shared between sessions: two contexts never see each
    other's buffer, history, or pending decoration.
    """

    buffer: LineBuffer = field(default_factory=LineBuffer)
    history: HistoryManager = field(default_factory=HistoryManager)
    latch: DecorationLatch = field(default_factory=DecorationLatch)
    bus: EventBus = field(default_factory=EventBus)
    running: bool = True

    def record_undo_point(self) -> None:
        """Push the current buffer onto the undo stack ahead of an edit."""

        self.history.capture_before_mutation(self.buffer.snapshot())


__all__ = ["CommandResult", "EditorContext", "EventBus"]
