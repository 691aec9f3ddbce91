from __future__ import annotations

import pytest

from linepad.buffer import BufferSnapshot, HistoryManager, HistoryState


def snap(*lines: str) -> BufferSnapshot:
    return BufferSnapshot.of(lines)


def test_undo_and_redo_on_empty_stacks_are_noops() -> None:
    history = HistoryManager()

    assert history.undo(snap("a")) is None
    assert history.redo(snap("a")) is None
    assert history.undo_depth == 0
    assert history.redo_depth == 0


def test_undo_returns_previous_snapshot_and_feeds_redo() -> None:
    history = HistoryManager()
    history.capture_before_mutation(snap("x"))

    restored = history.undo(snap("xy"))

    assert restored == snap("x")
    assert history.can_undo() is False
    assert history.can_redo() is True
    assert history.state is HistoryState.DIVERGENT

    again = history.redo(snap("x"))
    assert again == snap("xy")
    assert history.state is HistoryState.CLEAN


def test_capture_clears_redo_stack() -> None:
    history = HistoryManager()
    history.capture_before_mutation(snap("a"))
    history.undo(snap("ab"))
    assert history.can_redo()

    history.capture_before_mutation(snap("a"))

    assert history.can_redo() is False
    assert history.redo(snap("ac")) is None


def test_undo_is_last_in_first_out() -> None:
    history = HistoryManager()
    history.capture_before_mutation(snap(""))
    history.capture_before_mutation(snap("a"))
    history.capture_before_mutation(snap("ab"))

    assert history.undo(snap("abc")) == snap("ab")
    assert history.undo(snap("ab")) == snap("a")
    assert history.undo(snap("a")) == snap("")
    assert history.undo(snap("")) is None


def test_max_depth_evicts_oldest_entries() -> None:
    history = HistoryManager(max_depth=2)
    for text in ("", "a", "ab"):
        history.capture_before_mutation(snap(text))

    assert history.undo_depth == 2
    assert history.undo(snap("abc")) == snap("ab")
    assert history.undo(snap("ab")) == snap("a")
    assert history.undo(snap("a")) is None


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        HistoryManager(max_depth=0)


def test_clear_empties_both_stacks() -> None:
    history = HistoryManager()
    history.capture_before_mutation(snap("a"))
    history.undo(snap("b"))

    history.clear()

    assert history.undo_depth == 0
    assert history.redo_depth == 0


def test_snapshot_defaults_to_single_empty_line() -> None:
    assert BufferSnapshot.of([]).lines == ("",)
    assert snap("a", "b").text == "a\nb"
