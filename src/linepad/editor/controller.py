"""Single-threaded command dispatch for one editing session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from linepad.actions import CommandResult, EditorContext, insert_character
from linepad.buffer import BufferMirror
from linepad.keymaps import (
    KeyStroke,
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
)
from linepad.runtime import telemetry

PRINTABLE_RANGE = range(32, 127)


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed to the controller."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        return KeyStroke(self.key, self.modifiers).token

    @property
    def printable(self) -> Optional[str]:
        """The character to insert, if this key types exactly one."""

        candidate = self.text if self.text is not None else self.key
        if self.modifiers and set(m.lower() for m in self.modifiers) - {"shift"}:
            return None
        if len(candidate) == 1 and ord(candidate) in PRINTABLE_RANGE:
            return candidate
        return None


class EditorController:
    """Owns the session context and turns key events into buffer commands.

    Keys are resolved through the keymap first; anything unbound that types a
    printable character becomes an insertion. Each call is fully processed
    before returning, so a host can redraw from ``mirror()`` right after.
    """

    def __init__(
        self,
        context: Optional[EditorContext] = None,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context or EditorContext()
        self.logger = telemetry.get_logger("linepad.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="linepad.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="linepad.keymaps"
        )

    @property
    def running(self) -> bool:
        return self.context.running

    def mirror(self) -> BufferMirror:
        return self.context.buffer.mirror()

    def handle_key(self, key: KeyInput) -> CommandResult:
        if not self.context.running:
            return CommandResult(consumed=False, status="stopped")

        token = key.token
        with telemetry.span(
            "editor::handle_key",
            logger_name="linepad.editor",
            component="editor",
            metadata={"token": token},
        ) as handle:
            resolution = self.keymap_resolver.resolve(token)
            if resolution.status == "match" and resolution.match:
                result = self._execute_match(resolution.match)
            else:
                char = key.printable
                if char is None:
                    handle.add_metadata("status", "ignored")
                    return CommandResult(consumed=False, status="ignored")
                result = insert_character(self.context, char)
            handle.add_metadata("status", result.status)

        if result.exit:
            telemetry.record_event("session.exit", logger_name="linepad.editor")
        return result

    def type_text(self, text: str) -> list[CommandResult]:
        """Feed each character of ``text`` as its own key press."""

        results = []
        for char in text:
            key = KeyInput(key="ENTER") if char == "\n" else KeyInput(key=char, text=char)
            results.append(self.handle_key(key))
        return results

    def _execute_match(self, match: ResolutionMatch) -> CommandResult:
        outcome = match.action(self.context, match)
        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(consumed=True)


__all__ = ["EditorController", "KeyInput", "PRINTABLE_RANGE"]
