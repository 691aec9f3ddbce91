from __future__ import annotations

import pytest

from linepad.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("linepad.test") is telemetry.get_logger("linepad.test")


def test_span_reraises_and_yields_handle() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", metadata={"k": 1}) as handle:
            assert handle.metadata == {"k": "1"}
            raise RuntimeError("boom")


def test_presets_are_the_ones_the_cli_offers() -> None:
    assert telemetry.PRESETS == ("development", "production")
    with pytest.raises(ValueError):
        telemetry.configure(preset="performance")


def test_configure_drops_cached_loggers() -> None:
    before = telemetry.get_logger("linepad.test.cache")

    telemetry.configure()

    assert telemetry.get_logger("linepad.test.cache") is not before


def test_span_handle_stringifies_metadata() -> None:
    with telemetry.span("test::meta", component="tests") as handle:
        handle.add_metadata("rows", [1, 2])

    assert handle.component_name == "tests"
    assert handle.metadata == {"rows": "[1, 2]"}
