from __future__ import annotations

from pathlib import Path

from linepad.listing import ListingEntry, format_listing, walk_directory


def make_tree(root: Path) -> None:
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "mod.py").write_text("")
    (root / "src" / "a.txt").write_text("")
    (root / "README").write_text("")
    (root / ".hidden").write_text("")


def test_walk_is_preorder_and_sorted(tmp_path: Path) -> None:
    make_tree(tmp_path)

    entries = walk_directory(tmp_path)

    assert entries == [
        ListingEntry("README", False, 0),
        ListingEntry("src", True, 0),
        ListingEntry("a.txt", False, 1),
        ListingEntry("pkg", True, 1),
        ListingEntry("mod.py", False, 2),
    ]


def test_walk_can_include_hidden_entries(tmp_path: Path) -> None:
    make_tree(tmp_path)

    names = [entry.name for entry in walk_directory(tmp_path, show_hidden=True)]

    assert names[0] == ".hidden"


def test_walk_respects_max_depth(tmp_path: Path) -> None:
    make_tree(tmp_path)

    entries = walk_directory(tmp_path, max_depth=1)

    assert [entry.depth for entry in entries] == [0, 0, 1, 1]


def test_missing_root_yields_empty_listing(tmp_path: Path) -> None:
    assert walk_directory(tmp_path / "absent") == []


def test_format_listing_indents_and_marks_directories() -> None:
    entries = [
        ListingEntry("src", True, 0),
        ListingEntry("main.py", False, 1),
    ]

    assert format_listing(entries) == ["src/", "  main.py"]
