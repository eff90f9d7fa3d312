"""Local JSON-lines event log (opt-out via CREATE_TAU_APP_TELEMETRY=0)."""

from __future__ import annotations

import json
import os
import time
from typing import Any

from create_tau_app.settings import RuntimeSettings

LEVELS = {"info", "warn", "error"}
LOG_FILENAME = "telemetry.jsonl"

_DISABLE_VALUES = {"0", "false", "no", "off"}


def telemetry_enabled() -> bool:
    value = os.getenv("CREATE_TAU_APP_TELEMETRY", "1").lower()
    return value not in _DISABLE_VALUES


def record_event(
    settings: RuntimeSettings,
    event: str,
    payload: dict[str, Any] | None = None,
    *,
    level: str = "info",
    status: str | None = None,
    duration_ms: float | None = None,
) -> None:
    if not telemetry_enabled():
        return
    record: dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        "payload": payload or {},
        "level": level,
        "version": settings.cli_version,
    }
    if status:
        record["status"] = status
    if duration_ms is not None:
        record["durationMs"] = duration_ms
    _validate_record(record)
    log_path = settings.log_dir / LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(record, ensure_ascii=False) + "\n")


def _validate_record(record: dict[str, Any]) -> None:
    if not isinstance(record.get("event"), str) or not record["event"].strip():
        raise ValueError("Telemetry event must have non-empty string 'event'")
    if not isinstance(record.get("payload"), dict):
        raise ValueError("Telemetry payload must be a dict")
    level = record.get("level", "info")
    if level not in LEVELS:
        raise ValueError(f"Telemetry level '{level}' is not supported")
    if "durationMs" in record and record["durationMs"] is not None:
        if not isinstance(record["durationMs"], (int, float)) or record["durationMs"] < 0:
            raise ValueError("Telemetry durationMs must be a non-negative number")
