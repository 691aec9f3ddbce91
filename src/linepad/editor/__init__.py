"""Editor controller and key input types."""

from linepad.actions import CommandResult, EditorContext, EventBus

from .controller import PRINTABLE_RANGE, EditorController, KeyInput

__all__ = [
    "CommandResult",
    "EditorContext",
    "EditorController",
    "EventBus",
    "KeyInput",
    "PRINTABLE_RANGE",
]
