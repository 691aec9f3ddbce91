"""Inline decoration markup applied to characters at insertion time."""

from .annotator import MARKERS, Decoration, DecorationLatch, annotate

__all__ = [
    "Decoration",
    "DecorationLatch",
    "MARKERS",
    "annotate",
]
