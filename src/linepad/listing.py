"""Read-only directory listing shown beside the edit area.

The walk is recomputed from scratch for every frame and shares nothing with
the editing session: it takes a root path and returns plain tuples.
"""

from __future__ import annotations

import os
from typing import Iterator, List, NamedTuple, Optional, Union

from linepad.runtime import telemetry

logger = telemetry.get_logger("linepad.listing")

PathLike = Union[str, "os.PathLike[str]"]

DIRECTORY_SUFFIX = "/"
INDENT = "  "


class ListingEntry(NamedTuple):
    name: str
    is_dir: bool
    depth: int


def _sorted_entries(path: str, show_hidden: bool) -> List[os.DirEntry]:
    with os.scandir(path) as entries_iter:
        entries = [
            entry
            for entry in entries_iter
            if show_hidden or not entry.name.startswith(".")
        ]
    entries.sort(key=lambda e: e.name)
    return entries


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def iter_directory(
    root: PathLike,
    *,
    show_hidden: bool = False,
    max_depth: Optional[int] = None,
    _depth: int = 0,
) -> Iterator[ListingEntry]:
    """Yield entries under ``root`` depth-first, pre-order, sorted by name.

    The root itself is not yielded; its children have depth 0. Symlinked
    directories are listed but not descended into. A directory that cannot
    be read contributes no children and is logged.
    """

    path = os.fspath(root)
    try:
        entries = _sorted_entries(path, show_hidden)
    except OSError as exc:
        logger.warning(f"listing::skip path={path} error={exc}")
        return

    for entry in entries:
        is_dir = _is_dir(entry)
        yield ListingEntry(entry.name, is_dir, _depth)
        if is_dir and (max_depth is None or _depth < max_depth):
            yield from iter_directory(
                entry.path,
                show_hidden=show_hidden,
                max_depth=max_depth,
                _depth=_depth + 1,
            )


def walk_directory(
    root: PathLike, *, show_hidden: bool = False, max_depth: Optional[int] = None
) -> List[ListingEntry]:
    """Return the flattened listing for ``root`` as a list."""

    with telemetry.span(
        "listing::walk",
        logger_name="linepad.listing",
        metadata={"root": os.fspath(root)},
    ) as handle:
        entries = list(
            iter_directory(root, show_hidden=show_hidden, max_depth=max_depth)
        )
        handle.add_metadata("entries", len(entries))
    return entries


def format_listing(entries: List[ListingEntry]) -> List[str]:
    """Render entries as indented names, directories suffixed with ``/``."""

    return [
        f"{INDENT * entry.depth}{entry.name}{DIRECTORY_SUFFIX if entry.is_dir else ''}"
        for entry in entries
    ]


__all__ = [
    "ListingEntry",
    "format_listing",
    "iter_directory",
    "walk_directory",
]
