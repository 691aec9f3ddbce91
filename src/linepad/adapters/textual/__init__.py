"""Textual host for the editor."""

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import render_buffer, status_line

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "render_buffer",
    "status_line",
]
