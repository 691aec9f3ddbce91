"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use linepad.adapters.textual.app"
    ) from exc

from linepad.actions import EditorContext
from linepad.buffer import BufferMirror, HistoryManager, LineBuffer
from linepad.editor import EditorController
from linepad.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import render_buffer, status_line

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}


def create_controller(
    *, text: str = "", history_limit: Optional[int] = None
) -> EditorController:
    """Build a controller with a fresh buffer, history, and the default keys."""

    context = EditorContext(
        buffer=LineBuffer.from_text(text),
        history=HistoryManager(max_depth=history_limit),
    )
    return EditorController(context)


@dataclass
class UIState:
    status_text: str = ""
    last_mirror: Optional[BufferMirror] = None


class LinepadApp(App[None]):
    """Buffer pane with a live directory listing beside it."""

    TITLE = "linepad"

    CSS = """
	Screen {
		layout: vertical;
	}

	#panes {
		height: 1fr;
	}

	#buffer-view {
		width: 3fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#listing-view {
		width: 1fr;
		border: round $secondary;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        root: str = ".",
        show_hidden: bool = False,
        history_limit: Optional[int] = None,
        text: str = "",
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._root = root
        self._show_hidden = show_hidden
        self._history_limit = history_limit
        self._initial_text = text
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._listing_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panes"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
            self._listing_widget = Static("", id="listing-view", markup=False)
            yield self._listing_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        controller = create_controller(
            text=self._initial_text, history_limit=self._history_limit
        )
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            update_listing=self._update_listing,
            handle_event=self._handle_event,
            request_exit=self.exit,
        )
        self.adapter = TextualEditorAdapter(
            controller,
            hooks,
            listing_root=self._root,
            show_hidden=self._show_hidden,
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._state.last_mirror = mirror
        if self._buffer_widget:
            self._buffer_widget.update(render_buffer(mirror))
        self._render_status()

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self._render_status()

    def _update_listing(self, lines: Sequence[str]) -> None:
        if self._listing_widget:
            self._listing_widget.update("\n".join(lines))

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "decoration.armed":
            self._update_status(f"next: {getattr(payload, 'value', payload)}")

    def _render_status(self) -> None:
        if self._status_widget and self._state.last_mirror is not None:
            self._status_widget.update(
                status_line(self._state.last_mirror, self._state.status_text)
            )

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key == "ctrl+c":
            return None
        if event.is_printable and event.character:
            return (event.character, event.character, ())
        *modifiers, name = key.split("+") if key != "+" else [key]
        name = NAMED_KEYS.get(name, name if len(name) == 1 else name.upper())
        return (name, None, tuple(m.upper() for m in modifiers))


def _env_int(key: str, fallback: Optional[int]) -> Optional[int]:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit text in the terminal with undo/redo and inline markup."
    )
    parser.add_argument(
        "--root",
        default=os.environ.get("LINEPAD_ROOT", os.getcwd()),
        help="Directory shown in the listing pane (default: current directory)",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        help="Include dot-files in the listing pane",
    )
    parser.add_argument(
        "--history-limit",
        type=int,
        default=_env_int("LINEPAD_HISTORY_LIMIT", None),
        help="Maximum undo steps to keep (default: unlimited)",
    )
    parser.add_argument(
        "--text",
        default="",
        help="Initial buffer contents",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("LINEPAD_LOG_PRESET", "production"),
        help="Logging preset; anything but 'development' keeps the console clean",
    )
    args = parser.parse_args(argv)
    if args.history_limit is not None and args.history_limit <= 0:
        parser.error("--history-limit must be positive")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = LinepadApp(
        root=args.root,
        show_hidden=args.show_hidden,
        history_limit=args.history_limit,
        text=args.text,
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
