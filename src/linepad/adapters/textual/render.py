"""Rich renderables for the buffer pane."""

from __future__ import annotations

from rich.text import Text

from linepad.buffer import BufferMirror

CURSOR_STYLE = "reverse"


def render_buffer(mirror: BufferMirror) -> Text:
    """Draw the buffer with the cursor cell highlighted.

    A cursor sitting at the end of a line highlights a trailing blank cell.
    """

    row, col = mirror.cursor
    text = Text(no_wrap=True)
    for index, line in enumerate(mirror.lines):
        if index:
            text.append("\n")
        if index != row:
            text.append(line)
            continue
        text.append(line[:col])
        text.append(line[col : col + 1] or " ", style=CURSOR_STYLE)
        text.append(line[col + 1 :])
    return text


def status_line(mirror: BufferMirror, message: str = "") -> str:
    row, col = mirror.cursor
    position = f"Ln {row + 1}, Col {col + 1}"
    return f"{position} | {message}" if message else position


__all__ = ["CURSOR_STYLE", "render_buffer", "status_line"]
