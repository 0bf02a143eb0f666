from __future__ import annotations

import pytest

from vision_editor.runtime.telemetry import TelemetrySettings, configure


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VISION_LOG_LEVEL", "debug")
    monkeypatch.setenv("VISION_NO_COLOR", "yes")
    monkeypatch.setenv("VISION_LOG_FILE", "/tmp/vision.log")
    monkeypatch.delenv("VISION_DISABLE_CONSOLE", raising=False)

    settings = TelemetrySettings.from_env()

    assert settings == TelemetrySettings(
        level="DEBUG", console=True, color=False, log_file="/tmp/vision.log"
    )


def test_tui_preset_never_writes_to_the_console() -> None:
    settings = TelemetrySettings(log_file="editor.log").for_preset("tui")

    assert settings.console is False
    assert settings.log_file == "editor.log"


def test_default_preset_keeps_settings() -> None:
    settings = TelemetrySettings(level="WARNING")

    assert settings.for_preset("default") is settings


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        configure(preset="production")
