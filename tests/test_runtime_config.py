import pytest

from source_engine.runtime import telemetry
from source_engine.runtime.config import (
    DEFAULT_RESYNC_WINDOW,
    EngineSettings,
    load_settings,
)


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SOURCE_ENGINE_RESYNC_WINDOW", raising=False)
    monkeypatch.delenv("SOURCE_ENGINE_REPORT_MISMATCHES", raising=False)

    settings = load_settings()

    assert settings == EngineSettings(DEFAULT_RESYNC_WINDOW, True)


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SOURCE_ENGINE_RESYNC_WINDOW", "7")
    monkeypatch.setenv("SOURCE_ENGINE_REPORT_MISMATCHES", "off")

    settings = load_settings()

    assert settings.resync_window == 7
    assert settings.report_mismatches is False


def test_malformed_window_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("SOURCE_ENGINE_RESYNC_WINDOW", "abc")

    assert load_settings().resync_window == DEFAULT_RESYNC_WINDOW


def test_window_must_be_positive() -> None:
    with pytest.raises(ValueError):
        EngineSettings(resync_window=0)


def test_configure_rejects_conflicting_arguments() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="staging")
