"""Built-in key table for the editor."""

from __future__ import annotations

from typing import Iterable, Sequence

from linepad.actions import core as core_actions
from linepad.actions import decoration as decoration_actions
from linepad.actions import editing as editing_actions
from linepad.actions import history as history_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.exit",
        handler=core_actions.exit_editor,
        description="Leave the editor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.line_break",
        handler=editing_actions.insert_line_break,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="cursor.left",
        handler=editing_actions.move_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="cursor.right",
        handler=editing_actions.move_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="cursor.up",
        handler=editing_actions.move_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="cursor.down",
        handler=editing_actions.move_down,
        description="Move cursor down",
    ),
    ActionRef(
        id="history.undo",
        handler=history_actions.undo,
        description="Undo the last edit",
    ),
    ActionRef(
        id="history.redo",
        handler=history_actions.redo,
        description="Redo the last undone edit",
    ),
    ActionRef(
        id="decoration.bold",
        handler=decoration_actions.arm_bold,
        description="Make the next character bold",
    ),
    ActionRef(
        id="decoration.italic",
        handler=decoration_actions.arm_italic,
        description="Make the next character italic",
    ),
    ActionRef(
        id="decoration.underline",
        handler=decoration_actions.arm_underline,
        description="Underline the next character",
    ),
)


def _binding(binding_id: str, token: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke.parse(token),
        action_id=action_id,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("exit.escape", "ESC", "core.exit", "Leave the editor"),
    _binding("exit.ctrl_q", "ctrl+q", "core.exit", "Leave the editor"),
    _binding("edit.backspace", "BACKSPACE", "edit.delete_backward", "Delete backward"),
    _binding("edit.ctrl_h", "ctrl+h", "edit.delete_backward", "Delete backward"),
    _binding("edit.enter", "ENTER", "edit.line_break", "New line"),
    _binding("cursor.left", "LEFT", "cursor.left", "Move left"),
    _binding("cursor.right", "RIGHT", "cursor.right", "Move right"),
    _binding("cursor.up", "UP", "cursor.up", "Move up"),
    _binding("cursor.down", "DOWN", "cursor.down", "Move down"),
    _binding("history.ctrl_z", "ctrl+z", "history.undo", "Undo"),
    _binding("history.ctrl_y", "ctrl+y", "history.redo", "Redo"),
    _binding("decoration.ctrl_b", "ctrl+b", "decoration.bold", "Bold next char"),
    _binding("decoration.ctrl_t", "ctrl+t", "decoration.italic", "Italic next char"),
    _binding(
        "decoration.ctrl_u", "ctrl+u", "decoration.underline", "Underline next char"
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and key table."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
