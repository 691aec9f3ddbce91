"""Session-level actions."""

from __future__ import annotations

from .context import CommandResult, EditorContext


def exit_editor(context: EditorContext, match) -> CommandResult:
    del match
    context.running = False
    context.bus.emit("session.exit", None)
    return CommandResult(consumed=True, status="exit", message="exit", exit=True)


__all__ = ["exit_editor"]
