"""Editing verbs dispatched by the controller."""

from .context import CommandResult, EditorContext, EventBus
from .core import exit_editor
from .decoration import arm_bold, arm_italic, arm_underline
from .editing import (
    delete_backward,
    insert_character,
    insert_line_break,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .history import redo, undo

__all__ = [
    "CommandResult",
    "EditorContext",
    "EventBus",
    "arm_bold",
    "arm_italic",
    "arm_underline",
    "delete_backward",
    "exit_editor",
    "insert_character",
    "insert_line_break",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "redo",
    "undo",
]
