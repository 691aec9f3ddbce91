"""Decoration modes and the single-slot latch that applies them."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Decoration(str, Enum):
    """Styles a character can be wrapped in before it reaches the buffer."""

    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


MARKERS: Mapping[Decoration, str] = MappingProxyType(
    {
        Decoration.NONE: "",
        Decoration.BOLD: "**",
        Decoration.ITALIC: "*",
        Decoration.UNDERLINE: "_",
    }
)


def annotate(char: str, decoration: Decoration = Decoration.NONE) -> str:
    """Wrap ``char`` in the markers for ``decoration``.

    Exactly one keystroke is wrapped per call, so typing a run while a style
    is repeatedly armed yields adjacent pairs (``**a****b**``), never a single
    pair around the run.
    """

    marker = MARKERS[Decoration(decoration)]
    return f"{marker}{char}{marker}"


class DecorationLatch:
    """Pending style armed by a decoration key, consumed by the next insert."""

    def __init__(self) -> None:
        self._pending = Decoration.NONE

    @property
    def pending(self) -> Decoration:
        return self._pending

    @property
    def armed(self) -> bool:
        return self._pending is not Decoration.NONE

    def arm(self, decoration: Decoration) -> None:
        self._pending = Decoration(decoration)

    def consume(self) -> Decoration:
        decoration, self._pending = self._pending, Decoration.NONE
        return decoration

    def __repr__(self) -> str:
        return f"DecorationLatch(pending={self._pending.value!r})"


__all__ = ["Decoration", "DecorationLatch", "MARKERS", "annotate"]
