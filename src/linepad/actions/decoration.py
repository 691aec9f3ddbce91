"""Verbs that arm the decoration latch for the next typed character."""

from __future__ import annotations

from linepad.markup import Decoration

from .context import CommandResult, EditorContext


def _arm(context: EditorContext, decoration: Decoration) -> CommandResult:
    context.latch.arm(decoration)
    context.bus.emit("decoration.armed", decoration)
    return CommandResult(consumed=True, status="armed", message=decoration.value)


def arm_bold(context: EditorContext, match) -> CommandResult:
    del match
    return _arm(context, Decoration.BOLD)


def arm_italic(context: EditorContext, match) -> CommandResult:
    del match
    return _arm(context, Decoration.ITALIC)


def arm_underline(context: EditorContext, match) -> CommandResult:
    del match
    return _arm(context, Decoration.UNDERLINE)


__all__ = ["arm_bold", "arm_italic", "arm_underline"]
