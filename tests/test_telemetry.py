from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_tau_app.settings import RuntimeSettings
from create_tau_app.utils import telemetry


@pytest.fixture
def settings(tmp_path: Path) -> RuntimeSettings:
    return RuntimeSettings.for_home(tmp_path / "home")


def test_record_appends_json_line(monkeypatch: pytest.MonkeyPatch, settings: RuntimeSettings) -> None:
    monkeypatch.setenv("CREATE_TAU_APP_TELEMETRY", "1")

    telemetry.record_event(settings, "generate", {"requested": "latest"}, status="ok", duration_ms=12.5)

    log = settings.log_dir / telemetry.LOG_FILENAME
    events = [json.loads(line) for line in log.read_text(encoding="utf-8").splitlines()]
    assert len(events) == 1
    assert events[0]["event"] == "generate"
    assert events[0]["status"] == "ok"
    assert events[0]["durationMs"] == 12.5
    assert events[0]["version"] == settings.cli_version


def test_disabled_telemetry_writes_nothing(monkeypatch: pytest.MonkeyPatch, settings: RuntimeSettings) -> None:
    monkeypatch.setenv("CREATE_TAU_APP_TELEMETRY", "off")

    telemetry.record_event(settings, "generate")

    assert not (settings.log_dir / telemetry.LOG_FILENAME).exists()


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch, settings: RuntimeSettings) -> None:
    monkeypatch.setenv("CREATE_TAU_APP_TELEMETRY", "1")

    with pytest.raises(ValueError):
        telemetry.record_event(settings, "generate", level="debug")
