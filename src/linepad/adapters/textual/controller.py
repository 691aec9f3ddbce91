"""Adapter that turns host key events into controller commands and redraws."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from linepad.actions import CommandResult
from linepad.buffer import BufferMirror
from linepad.editor import EditorController, KeyInput
from linepad.listing import ListingEntry, format_listing, walk_directory
from linepad.runtime import telemetry

ListingProvider = Callable[[str], List[ListingEntry]]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    update_listing: Callable[[Sequence[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop
    request_exit: Callable[[], None] = _noop


class TextualEditorAdapter:
    """Bridges an ``EditorController`` to a Textual-friendly surface.

    Every handled key ends with a full redraw: the buffer mirror and a fresh
    directory listing are pushed to the hooks. The listing provider is only
    ever given the root path, never editor state.
    """

    def __init__(
        self,
        controller: EditorController,
        hooks: TextualUIHooks,
        *,
        listing_root: str | os.PathLike[str] = ".",
        show_hidden: bool = False,
        listing_provider: Optional[ListingProvider] = None,
    ) -> None:
        self.controller = controller
        self.hooks = hooks
        self.listing_root = os.fspath(listing_root)
        self.show_hidden = show_hidden
        self._listing_provider = listing_provider or self._walk
        self.logger = telemetry.get_logger("linepad.adapters.textual")
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> CommandResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.controller.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        if result.consumed:
            self.hooks.update_status(result.message or result.status)
        self.refresh()
        if result.exit:
            self.hooks.request_exit()
        return result

    def refresh(self) -> None:
        self.hooks.update_buffer(self.controller.mirror())
        self.hooks.update_listing(
            format_listing(self._listing_provider(self.listing_root))
        )

    def _walk(self, root: str) -> List[ListingEntry]:
        return walk_directory(root, show_hidden=self.show_hidden)

    def _subscribe_events(self) -> None:
        bus = self.controller.context.bus
        for event in (
            "buffer.changed",
            "cursor.moved",
            "history.undo",
            "history.redo",
            "decoration.armed",
            "session.exit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix] + [f"{key}={value!r}" for key, value in snapshot.items()])
        self.logger.debug(line)
        self.hooks.log(line)

    def _state_metadata(self) -> Dict[str, object]:
        context = self.controller.context
        return {
            "cursor": context.buffer.cursor,
            "lines": context.buffer.line_count,
            "version": context.buffer.version,
            "decoration": context.latch.pending.value,
            "undo": context.history.undo_depth,
            "redo": context.history.redo_depth,
        }


__all__ = ["ListingProvider", "TextualEditorAdapter", "TextualUIHooks"]
