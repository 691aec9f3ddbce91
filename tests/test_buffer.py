from __future__ import annotations

import pytest

from linepad.buffer import (
    BufferValidationError,
    Direction,
    LineBuffer,
    ensure_cursor,
)


def test_package_exports_resolve() -> None:
    import linepad.buffer as package

    missing = [name for name in package.__all__ if not hasattr(package, name)]

    assert missing == []


def make_buffer(*lines: str, cursor: tuple[int, int] = (0, 0)) -> LineBuffer:
    return LineBuffer(list(lines) or None, cursor=cursor)


def test_new_buffer_has_one_empty_line() -> None:
    buffer = LineBuffer()

    assert buffer.lines == ("",)
    assert buffer.cursor == (0, 0)


def test_empty_line_list_becomes_single_empty_line() -> None:
    buffer = LineBuffer([])

    assert buffer.lines == ("",)


def test_insert_text_advances_by_fragment_length() -> None:
    buffer = make_buffer("hello", cursor=(0, 5))

    cursor = buffer.insert_text("**!**")

    assert buffer.lines == ("hello**!**",)
    assert cursor == (0, 10)


def test_insert_text_mid_line() -> None:
    buffer = make_buffer("ac", cursor=(0, 1))

    buffer.insert_text("b")

    assert buffer.lines == ("abc",)
    assert buffer.cursor == (0, 2)


def test_insert_line_break_splits_line() -> None:
    buffer = make_buffer("abcd", cursor=(0, 2))

    cursor = buffer.insert_line_break()

    assert buffer.lines == ("ab", "cd")
    assert cursor == (1, 0)


def test_insert_line_break_at_end_adds_empty_line() -> None:
    buffer = make_buffer("ab", cursor=(0, 2))

    buffer.insert_line_break()

    assert buffer.lines == ("ab", "")


def test_delete_backward_within_line() -> None:
    buffer = make_buffer("abc", cursor=(0, 2))

    assert buffer.delete_backward() is True
    assert buffer.lines == ("ac",)
    assert buffer.cursor == (0, 1)


def test_delete_backward_merges_with_previous_line() -> None:
    buffer = make_buffer("ab", "cd", cursor=(1, 0))

    assert buffer.delete_backward() is True
    assert buffer.lines == ("abcd",)
    assert buffer.cursor == (0, 2)


def test_delete_backward_at_origin_is_noop() -> None:
    buffer = make_buffer("abc")
    version = buffer.version

    assert buffer.can_delete_backward() is False
    assert buffer.delete_backward() is False
    assert buffer.lines == ("abc",)
    assert buffer.cursor == (0, 0)
    assert buffer.version == version


def test_move_left_and_right_stay_on_line() -> None:
    buffer = make_buffer("ab", "cd", cursor=(1, 0))

    assert buffer.move_cursor(Direction.LEFT) is False
    assert buffer.cursor == (1, 0)

    buffer.set_cursor(0, 2)
    assert buffer.move_cursor(Direction.RIGHT) is False
    assert buffer.cursor == (0, 2)

    assert buffer.move_cursor(Direction.LEFT) is True
    assert buffer.cursor == (0, 1)


def test_vertical_move_clamps_column_to_shorter_line() -> None:
    buffer = make_buffer("a", "hello", "ab", cursor=(1, 5))

    assert buffer.move_cursor(Direction.UP) is True
    assert buffer.cursor == (0, 1)

    buffer.set_cursor(1, 4)
    assert buffer.move_cursor(Direction.DOWN) is True
    assert buffer.cursor == (2, 2)


def test_vertical_move_at_edges_is_noop() -> None:
    buffer = make_buffer("a", "b")

    assert buffer.move_cursor(Direction.UP) is False
    buffer.set_cursor(1, 0)
    assert buffer.move_cursor(Direction.DOWN) is False
    assert buffer.cursor == (1, 0)


def test_snapshot_is_independent_of_later_edits() -> None:
    buffer = make_buffer("x", cursor=(0, 1))
    snapshot = buffer.snapshot()

    buffer.insert_text("y")
    buffer.insert_line_break()

    assert snapshot.lines == ("x",)
    assert buffer.lines == ("xy", "")


def test_restore_replaces_lines_and_resets_cursor() -> None:
    buffer = make_buffer("first", "second", cursor=(1, 3))
    snapshot = make_buffer("only").snapshot()

    buffer.restore(snapshot)

    assert buffer.lines == ("only",)
    assert buffer.cursor == (0, 0)


def test_mirror_reflects_state_and_version() -> None:
    buffer = make_buffer("ab", cursor=(0, 2))
    buffer.insert_text("c")

    mirror = buffer.mirror()

    assert mirror.lines == ("abc",)
    assert mirror.cursor == (0, 3)
    assert mirror.version == 1
    assert mirror.text == "abc"


def test_from_text_round_trips_newlines() -> None:
    buffer = LineBuffer.from_text("one\ntwo\n")

    assert buffer.lines == ("one", "two", "")
    assert buffer.text == "one\ntwo\n"


def test_out_of_range_cursor_is_rejected() -> None:
    with pytest.raises(BufferValidationError) as excinfo:
        make_buffer("ab", cursor=(0, 3))
    assert excinfo.value.cursor == (0, 3)

    buffer = make_buffer("ab")
    with pytest.raises(BufferValidationError):
        buffer.set_cursor(2, 0)


def test_ensure_cursor_accepts_line_end() -> None:
    assert ensure_cursor(("abc",), (0, 3)) == (0, 3)
