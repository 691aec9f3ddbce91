"""Undo and redo verbs."""

from __future__ import annotations

from linepad.runtime import telemetry

from .context import CommandResult, EditorContext


def undo(context: EditorContext, match) -> CommandResult:
    del match
    restored = context.history.undo(context.buffer.snapshot())
    if restored is None:
        return CommandResult(consumed=True, status="noop", message="nothing_to_undo")
    context.buffer.restore(restored)
    telemetry.record_event(
        "history.undo",
        level="debug",
        data={
            "undo_depth": context.history.undo_depth,
            "redo_depth": context.history.redo_depth,
        },
    )
    context.bus.emit("history.undo", restored)
    return CommandResult(consumed=True, status="history", message="undo")


def redo(context: EditorContext, match) -> CommandResult:
    del match
    restored = context.history.redo(context.buffer.snapshot())
    if restored is None:
        return CommandResult(consumed=True, status="noop", message="nothing_to_redo")
    context.buffer.restore(restored)
    telemetry.record_event(
        "history.redo",
        level="debug",
        data={
            "undo_depth": context.history.undo_depth,
            "redo_depth": context.history.redo_depth,
        },
    )
    context.bus.emit("history.redo", restored)
    return CommandResult(consumed=True, status="history", message="redo")


__all__ = ["redo", "undo"]
