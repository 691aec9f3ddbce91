from __future__ import annotations

from types import SimpleNamespace

import pytest

from linepad.adapters.textual.app import LinepadApp, _parse_args, create_controller


def key_event(key: str, character: str | None = None, printable: bool = False):
    return SimpleNamespace(key=key, character=character, is_printable=printable)


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (key_event("a", "a", True), ("a", "a", ())),
        (key_event("space", " ", True), (" ", " ", ())),
        (key_event("escape", "\x1b"), ("ESC", None, ())),
        (key_event("enter", "\r"), ("ENTER", None, ())),
        (key_event("backspace", "\x7f"), ("BACKSPACE", None, ())),
        (key_event("up"), ("UP", None, ())),
        (key_event("ctrl+z", "\x1a"), ("z", None, ("CTRL",))),
        (key_event("shift+left"), ("LEFT", None, ("SHIFT",))),
        (key_event("f5"), ("F5", None, ())),
    ],
)
def test_normalize_key(event, expected) -> None:
    assert LinepadApp._normalize_key(event) == expected


def test_normalize_key_leaves_ctrl_c_to_textual() -> None:
    assert LinepadApp._normalize_key(key_event("ctrl+c", "\x03")) is None


def test_parse_args_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LINEPAD_HISTORY_LIMIT", raising=False)

    args = _parse_args([])

    assert args.history_limit is None
    assert args.show_hidden is False
    assert args.log_preset == "production"


def test_parse_args_history_limit_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LINEPAD_HISTORY_LIMIT", "5")

    assert _parse_args([]).history_limit == 5


def test_parse_args_rejects_non_positive_limit() -> None:
    with pytest.raises(SystemExit):
        _parse_args(["--history-limit", "0"])


def test_create_controller_seeds_buffer_and_limit() -> None:
    controller = create_controller(text="one\ntwo", history_limit=3)

    assert controller.context.buffer.lines == ("one", "two")
    assert controller.context.history.max_depth == 3
