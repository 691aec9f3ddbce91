"""Buffer-mutating verbs and cursor motion."""

from __future__ import annotations

from linepad.buffer import Direction
from linepad.markup import Decoration, annotate

from .context import CommandResult, EditorContext


def insert_character(context: EditorContext, char: str) -> CommandResult:
    """Insert one typed character, wrapped in the armed decoration if any."""

    decoration = context.latch.consume()
    fragment = annotate(char, decoration)
    context.record_undo_point()
    cursor = context.buffer.insert_text(fragment)
    context.bus.emit(
        "buffer.changed",
        {"action": "insert", "fragment": fragment, "cursor": cursor},
    )
    message = "insert" if decoration is Decoration.NONE else f"insert:{decoration.value}"
    return CommandResult(consumed=True, status="edit", message=message, mutated=True)


def insert_line_break(context: EditorContext, match) -> CommandResult:
    del match
    context.record_undo_point()
    cursor = context.buffer.insert_line_break()
    context.bus.emit("buffer.changed", {"action": "newline", "cursor": cursor})
    return CommandResult(consumed=True, status="edit", message="newline", mutated=True)


def delete_backward(context: EditorContext, match) -> CommandResult:
    del match
    buffer = context.buffer
    # Nothing before (0, 0), so there is nothing worth an undo step either.
    if not buffer.can_delete_backward():
        return CommandResult(consumed=True, status="noop", message="start_of_buffer")
    context.record_undo_point()
    buffer.delete_backward()
    context.bus.emit(
        "buffer.changed", {"action": "delete", "cursor": buffer.cursor}
    )
    return CommandResult(consumed=True, status="edit", message="delete", mutated=True)


def _move(context: EditorContext, direction: Direction) -> CommandResult:
    if not context.buffer.move_cursor(direction):
        return CommandResult(consumed=True, status="noop", message=f"edge:{direction.value}")
    context.bus.emit(
        "cursor.moved", {"direction": direction.value, "cursor": context.buffer.cursor}
    )
    return CommandResult(consumed=True, status="move", message=f"move:{direction.value}")


def move_left(context: EditorContext, match) -> CommandResult:
    del match
    return _move(context, Direction.LEFT)


def move_right(context: EditorContext, match) -> CommandResult:
    del match
    return _move(context, Direction.RIGHT)


def move_up(context: EditorContext, match) -> CommandResult:
    del match
    return _move(context, Direction.UP)


def move_down(context: EditorContext, match) -> CommandResult:
    del match
    return _move(context, Direction.DOWN)


__all__ = [
    "delete_backward",
    "insert_character",
    "insert_line_break",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
]
