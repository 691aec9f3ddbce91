"""Dataclasses describing key strokes, actions, and the bindings between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

MODIFIER_ORDER = ("ctrl", "alt", "shift")


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = {m.strip().lower() for m in modifiers if m.strip()}
    known = tuple(m for m in MODIFIER_ORDER if m in values)
    return known + tuple(sorted(values.difference(MODIFIER_ORDER)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press.

    Named keys are upper-case (``ESC``, ``ENTER``, ``LEFT``); printable keys
    are the character itself. Modifiers are lower-cased and ordered so that
    ``KeyStroke("z", ("CTRL",)).token == "ctrl+z"``.
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+z"``-style text; a lone ``+`` is a key."""

        if token == "+" or "+" not in token.strip("+"):
            return cls(token)
        *modifiers, key = token.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key stroke with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "MODIFIER_ORDER",
]
