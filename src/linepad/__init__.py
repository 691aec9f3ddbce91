"""Line-oriented terminal text editor with snapshot undo/redo and inline markup."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "editor",
    "keymaps",
    "listing",
    "markup",
    "runtime",
]

__version__ = "0.1.0"
